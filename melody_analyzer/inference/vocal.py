"""Vocal track identification - find the track carrying the lead melody.

Each track with notes is scored 0-100 on five independent criteria:
- Track name mentions a vocal/melody keyword (30)
- Pitch range sits inside the vocal range C3-C6 (25 / 15)
- Plausible number of notes (20 / 10)
- Note density in a singable band (15)
- Variety of melodic intervals (10)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core import NoteEvent, VOCAL_RANGE, VOCAL_KEYWORDS
from ..analysis import (
    PitchRange,
    pitch_range,
    range_overlap,
    note_density,
    interval_variety,
)
from ..input import Score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VocalScoringConfig:
    """Weights and thresholds for vocal track scoring.

    Attributes:
        keywords: Case-insensitive substrings that mark a vocal track name
        vocal_range: Reference (low, high) MIDI pitch range, inclusive
        name_weight: Points for a keyword match (default: 30)
        range_high_overlap: Overlap ratio for full range points (default: 0.7)
        range_high_weight: Points above range_high_overlap (default: 25)
        range_low_overlap: Overlap ratio for partial range points (default: 0.5)
        range_low_weight: Points above range_low_overlap (default: 15)
        count_band: Inclusive note-count band for full count points
        count_band_weight: Points inside count_band (default: 20)
        count_min: Note count above which partial points apply (default: 10)
        count_min_weight: Partial count points (default: 10)
        density_band: Open (low, high) band of notes per tick
        density_weight: Points inside density_band (default: 15)
        variety_threshold: Interval variety above which points apply (default: 0.3)
        variety_weight: Points for interval variety (default: 10)
    """

    keywords: Tuple[str, ...] = VOCAL_KEYWORDS
    vocal_range: PitchRange = VOCAL_RANGE
    name_weight: float = 30.0
    range_high_overlap: float = 0.7
    range_high_weight: float = 25.0
    range_low_overlap: float = 0.5
    range_low_weight: float = 15.0
    count_band: Tuple[int, int] = (20, 200)
    count_band_weight: float = 20.0
    count_min: int = 10
    count_min_weight: float = 10.0
    density_band: Tuple[float, float] = (0.3, 0.8)
    density_weight: float = 15.0
    variety_threshold: float = 0.3
    variety_weight: float = 10.0


@dataclass(frozen=True)
class TrackCandidate:
    """A track that could carry the vocal melody, with its score."""
    track_index: int
    track_name: str
    note_count: int
    pitch_range: PitchRange
    score: float


class VocalTrackScorer:
    """Score tracks for vocal-melody plausibility and pick the best one."""

    def __init__(self, config: Optional[VocalScoringConfig] = None):
        """
        Initialize VocalTrackScorer.

        Args:
            config: Optional VocalScoringConfig; defaults apply otherwise
        """
        self.config = config or VocalScoringConfig()

    def name_matches(self, track_name: str) -> bool:
        lowered = (track_name or "").lower()
        return any(keyword.lower() in lowered for keyword in self.config.keywords)

    def score(self, notes: Sequence[NoteEvent], track_name: str) -> float:
        """
        Score one track.

        Args:
            notes: The track's notes, in any order
            track_name: The track's name (may be empty)

        Returns:
            Score in [0, 100]; 0 for a track without notes
        """
        if not notes:
            return 0.0

        cfg = self.config
        total = 0.0

        if self.name_matches(track_name):
            total += cfg.name_weight

        overlap = range_overlap(pitch_range(notes), cfg.vocal_range)
        if overlap > cfg.range_high_overlap:
            total += cfg.range_high_weight
        elif overlap > cfg.range_low_overlap:
            total += cfg.range_low_weight

        count = len(notes)
        if cfg.count_band[0] <= count <= cfg.count_band[1]:
            total += cfg.count_band_weight
        elif count > cfg.count_min:
            total += cfg.count_min_weight

        density = note_density(notes)
        if cfg.density_band[0] < density < cfg.density_band[1]:
            total += cfg.density_weight

        if interval_variety(notes) > cfg.variety_threshold:
            total += cfg.variety_weight

        return total

    def rank(self, score: Score) -> List[TrackCandidate]:
        """
        Score every track that has notes.

        Returns:
            Candidates in track-index order
        """
        candidates = []
        for track in score.tracks:
            if not track.note_count:
                continue

            notes = score.extract_notes(track.index)
            candidate = TrackCandidate(
                track_index=track.index,
                track_name=track.name,
                note_count=len(notes),
                pitch_range=pitch_range(notes),
                score=self.score(notes, track.name),
            )
            logger.debug(
                "Track %d '%s': %d notes, range %s, score %.1f",
                candidate.track_index,
                candidate.track_name,
                candidate.note_count,
                candidate.pitch_range,
                candidate.score,
            )
            candidates.append(candidate)

        return candidates

    @staticmethod
    def best(candidates: Sequence[TrackCandidate]) -> Optional[TrackCandidate]:
        """Highest score wins; on a tie the lowest track index is kept."""
        best = None
        for candidate in candidates:
            if best is None or candidate.score > best.score:
                best = candidate
        return best

    def select(self, score: Score) -> Optional[TrackCandidate]:
        """Pick the most plausible vocal track, or None if no track has notes."""
        return self.best(sorted(self.rank(score), key=lambda c: c.track_index))
