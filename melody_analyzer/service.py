"""Melody analysis service - the public entry point of the engine.

Pipeline for ``analyze``:
    validate → load → score every track → pick the vocal track →
    [range, rhythm, intervals, mode] → AnalysisResult

Expected failures are returned as an ``Outcome`` with an ``ErrorKind``;
``Outcome.unwrap()`` turns them into exceptions.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .core import (
    NoteEvent,
    ErrorKind,
    Outcome,
    MidiNotFoundError,
    DEFAULT_TICKS_PER_QUARTER,
)
from .analysis import (
    PitchRange,
    pitch_range,
    RhythmClassifier,
    RhythmDistribution,
    IntervalAnalyzer,
    IntervalDistribution,
)
from .inference import (
    VocalTrackScorer,
    VocalScoringConfig,
    TrackCandidate,
    ModeDetector,
    ModeAnalysis,
)
from .input import MidiLoader, Score
from .output import MelodyExporter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class AnalysisResult:
    """Melodic features of the vocal track of a MIDI file."""

    file_path: str
    total_notes: int
    note_range: PitchRange
    rhythm: RhythmDistribution
    intervals: IntervalDistribution
    mode: ModeAnalysis
    track_index: int = -1
    track_name: str = ""


@dataclass(frozen=True)
class FileInfo:
    """Basic properties of a MIDI file."""

    file_path: str
    track_count: int
    duration: float  # seconds
    ticks_per_quarter_note: int
    tempo_bpm: int


class MelodyAnalysisService:
    """Analyze MIDI files for their vocal melody."""

    def __init__(
        self,
        default_ticks_per_quarter: int = DEFAULT_TICKS_PER_QUARTER,
        scoring_config: Optional[VocalScoringConfig] = None,
    ):
        """
        Initialize MelodyAnalysisService.

        Args:
            default_ticks_per_quarter: Resolution assumed when a file's time
                division is not ticks-per-quarter-note
            scoring_config: Optional vocal track scoring configuration
        """
        self.loader = MidiLoader(default_ticks_per_quarter=default_ticks_per_quarter)
        self.scorer = VocalTrackScorer(config=scoring_config)
        self.mode_detector = ModeDetector()
        self.interval_analyzer = IntervalAnalyzer()

    def _load(self, path: Optional[PathLike]) -> Outcome[Score]:
        try:
            return Outcome.success(self.loader.load(path))
        except MidiNotFoundError as e:
            logger.debug("Rejected %s: %s", path, e)
            return Outcome.failure(ErrorKind.NOT_FOUND, str(e))

    def validate(self, path: Optional[PathLike]) -> bool:
        """True if the file exists and parses as a MIDI container."""
        return self._load(path).ok

    def get_file_info(self, path: Optional[PathLike]) -> Outcome[FileInfo]:
        """
        Report track count, duration, resolution and initial tempo.

        Returns:
            Outcome with FileInfo, or NOT_FOUND
        """
        loaded = self._load(path)
        if not loaded.ok:
            return Outcome.failure(loaded.error, loaded.message)

        score = loaded.value
        return Outcome.success(FileInfo(
            file_path=str(path),
            track_count=score.track_count,
            duration=score.duration,
            ticks_per_quarter_note=score.ticks_per_quarter_note,
            tempo_bpm=int(score.tempo_map.bpm_at(0)),
        ))

    def rank_tracks(self, path: Optional[PathLike]) -> Outcome[List[TrackCandidate]]:
        """Score every track with notes, in track order."""
        loaded = self._load(path)
        if not loaded.ok:
            return Outcome.failure(loaded.error, loaded.message)
        return Outcome.success(self.scorer.rank(loaded.value))

    def select_vocal_track(self, score: Score) -> Outcome[TrackCandidate]:
        """Pick the vocal track of a loaded score."""
        candidate = self.scorer.select(score)
        if candidate is None:
            return Outcome.failure(
                ErrorKind.NO_VOCAL_TRACK,
                f"No suitable vocal track found in {score.path}",
            )
        logger.debug(
            "Selected track %d '%s' (score %.1f)",
            candidate.track_index, candidate.track_name, candidate.score,
        )
        return Outcome.success(candidate)

    def _vocal_notes(self, score: Score) -> Outcome[Tuple[TrackCandidate, List[NoteEvent]]]:
        """Select the vocal track and extract its notes again."""
        selected = self.select_vocal_track(score)
        if not selected.ok:
            return Outcome.failure(selected.error, selected.message)

        candidate = selected.value
        notes = score.extract_notes(candidate.track_index)
        if not notes:
            return Outcome.failure(
                ErrorKind.EMPTY_SELECTION,
                f"No notes in selected track {candidate.track_index} of {score.path}",
            )
        return Outcome.success((candidate, notes))

    def analyze_score(self, score: Score) -> Outcome[AnalysisResult]:
        """Run the full analysis on an already loaded score."""
        vocal = self._vocal_notes(score)
        if not vocal.ok:
            return Outcome.failure(vocal.error, vocal.message)

        candidate, notes = vocal.value
        rhythm_classifier = RhythmClassifier(score.ticks_per_quarter_note)

        return Outcome.success(AnalysisResult(
            file_path=score.path,
            total_notes=len(notes),
            note_range=pitch_range(notes),
            rhythm=rhythm_classifier.analyze(notes),
            intervals=self.interval_analyzer.analyze(notes),
            mode=self.mode_detector.analyze(notes),
            track_index=candidate.track_index,
            track_name=candidate.track_name,
        ))

    def analyze(self, path: Optional[PathLike]) -> Outcome[AnalysisResult]:
        """
        Analyze the vocal melody of a MIDI file.

        Args:
            path: Path to MIDI file

        Returns:
            Outcome with AnalysisResult, or NOT_FOUND / NO_VOCAL_TRACK /
            EMPTY_SELECTION
        """
        loaded = self._load(path)
        if not loaded.ok:
            return Outcome.failure(loaded.error, loaded.message)

        outcome = self.analyze_score(loaded.value)
        if outcome.ok:
            # Report the path as given by the caller
            outcome = Outcome.success(replace(outcome.value, file_path=str(path)))
        return outcome

    def export_melody(
        self,
        path: Optional[PathLike],
        output_path: PathLike,
    ) -> Outcome[Path]:
        """
        Write the selected vocal track to its own MIDI file.

        Returns:
            Outcome with the written path, or the same errors as ``analyze``
        """
        loaded = self._load(path)
        if not loaded.ok:
            return Outcome.failure(loaded.error, loaded.message)

        score = loaded.value
        vocal = self._vocal_notes(score)
        if not vocal.ok:
            return Outcome.failure(vocal.error, vocal.message)

        candidate, notes = vocal.value
        exporter = MelodyExporter(instrument_name=candidate.track_name)
        return Outcome.success(exporter.export(notes, score.tempo_map, output_path))

    async def analyze_async(
        self,
        path: Optional[PathLike],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Outcome[AnalysisResult]:
        """
        Run ``analyze`` in a worker thread.

        Cancellation is only checked before the work starts.

        Raises:
            asyncio.CancelledError: If cancel_event is already set
        """
        _check_cancelled(cancel_event)
        return await asyncio.to_thread(self.analyze, path)

    async def get_file_info_async(
        self,
        path: Optional[PathLike],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Outcome[FileInfo]:
        """Run ``get_file_info`` in a worker thread."""
        _check_cancelled(cancel_event)
        return await asyncio.to_thread(self.get_file_info, path)


def _check_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError("Analysis cancelled before start")
