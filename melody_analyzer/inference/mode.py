"""Mode detection - identify the tonal center and scale of a melody.

Template matching against three scales relative to the most frequent pitch
class:
- Major (7 degrees)
- Natural minor (7 degrees)
- Major pentatonic (5 degrees)

Confidence is the share of notes whose pitch class belongs to the chosen
scale.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core import NoteEvent, PITCH_NAMES
from ..core.constants import MAJOR_SCALE, MINOR_SCALE, PENTATONIC_SCALE


@dataclass(frozen=True)
class ModeAnalysis:
    """Container for mode detection results."""

    detected_mode: str  # e.g. "C Major", "A Minor", "D Pentatonic"
    confidence: float  # 0.0 - 1.0
    scale_notes: Tuple[str, ...] = ()  # Pitch-class names of the scale
    tonic: Optional[str] = None
    pitch_class_histogram: Tuple[int, ...] = (0,) * 12  # Note counts per pitch class

    @classmethod
    def unknown(cls) -> "ModeAnalysis":
        return cls(detected_mode="Unknown", confidence=0.0)


class ModeDetector:
    """Detect the scale and mode of a note sequence."""

    SCALE_TEMPLATES = {
        "major": MAJOR_SCALE,
        "minor": MINOR_SCALE,
        "pentatonic": PENTATONIC_SCALE,
    }

    # Minimum number of template degrees present to accept a scale
    MIN_MATCHES = {
        "major": 5,
        "minor": 5,
        "pentatonic": 4,
    }

    def build_histogram(self, notes: Sequence[NoteEvent]) -> np.ndarray:
        """
        Count notes per pitch class.

        Returns:
            12-element integer array
        """
        histogram = np.zeros(12, dtype=np.int64)
        for note in notes:
            histogram[note.pitch_class] += 1
        return histogram

    @staticmethod
    def find_tonic(histogram: np.ndarray) -> int:
        """Most frequent pitch class; ties resolve to the lowest index."""
        return int(np.argmax(histogram))

    def count_matches(self, histogram: np.ndarray, tonic: int, template: Sequence[int]) -> int:
        """Number of template degrees whose pitch class occurs at least once."""
        return sum(1 for step in template if histogram[(tonic + step) % 12] > 0)

    def select_scale(self, histogram: np.ndarray, tonic: int) -> List[str]:
        """
        Choose the scale for a tonic.

        Major, minor and pentatonic are tried in that order; the first one
        with enough degrees present wins. Otherwise the observed pitch
        classes (ascending) are used.

        Returns:
            Pitch-class names of the scale, starting from the tonic for
            template scales
        """
        for name in ("major", "minor", "pentatonic"):
            template = self.SCALE_TEMPLATES[name]
            if self.count_matches(histogram, tonic, template) >= self.MIN_MATCHES[name]:
                return [PITCH_NAMES[(tonic + step) % 12] for step in template]

        return [PITCH_NAMES[pc] for pc in range(12) if histogram[pc] > 0]

    def identify_mode(self, scale_notes: Sequence[str], tonic: int) -> str:
        """
        Name the mode of a selected scale.

        Major requires all seven major degrees in a seven-note scale. Minor
        only checks the first N minor degrees, N being the scale length.
        Any other five-note scale is called pentatonic.
        """
        tonic_name = PITCH_NAMES[tonic]
        present = set(scale_notes)

        def degree_names(template):
            return [PITCH_NAMES[(tonic + step) % 12] for step in template]

        if len(scale_notes) == 7 and all(n in present for n in degree_names(MAJOR_SCALE)):
            return f"{tonic_name} Major"

        if len(scale_notes) >= 5:
            prefix = degree_names(MINOR_SCALE)[:len(scale_notes)]
            if all(n in present for n in prefix):
                return f"{tonic_name} Minor"

        if len(scale_notes) == 5:
            return f"{tonic_name} Pentatonic"

        return f"{tonic_name} (Unknown Mode)"

    @staticmethod
    def confidence(histogram: np.ndarray, scale_notes: Sequence[str]) -> float:
        """Share of notes whose pitch class is in the scale, clamped to [0, 1]."""
        total = int(histogram.sum())
        if total == 0 or not scale_notes:
            return 0.0

        in_scale = sum(
            int(histogram[pc]) for pc in range(12) if PITCH_NAMES[pc] in scale_notes
        )
        return max(0.0, min(1.0, in_scale / total))

    def analyze(self, notes: Sequence[NoteEvent]) -> ModeAnalysis:
        """
        Perform full mode analysis.

        Args:
            notes: Notes of one track

        Returns:
            ModeAnalysis; "Unknown" with zero confidence for no notes
        """
        if not notes:
            return ModeAnalysis.unknown()

        histogram = self.build_histogram(notes)
        tonic = self.find_tonic(histogram)
        scale_notes = self.select_scale(histogram, tonic)

        return ModeAnalysis(
            detected_mode=self.identify_mode(scale_notes, tonic),
            confidence=self.confidence(histogram, scale_notes),
            scale_notes=tuple(scale_notes),
            tonic=PITCH_NAMES[tonic],
            pitch_class_histogram=tuple(int(c) for c in histogram),
        )
