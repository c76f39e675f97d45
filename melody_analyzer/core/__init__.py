"""Core types and constants for Melody Analyzer."""

from .note import NoteEvent
from .constants import (
    PITCH_NAMES,
    DEFAULT_TICKS_PER_QUARTER,
    DEFAULT_TEMPO_US,
    VOCAL_RANGE,
    VOCAL_KEYWORDS,
)
from .errors import (
    ErrorKind,
    Outcome,
    AnalysisError,
    MidiNotFoundError,
    NoVocalTrackError,
    EmptySelectionError,
)

__all__ = [
    "NoteEvent",
    "PITCH_NAMES",
    "DEFAULT_TICKS_PER_QUARTER",
    "DEFAULT_TEMPO_US",
    "VOCAL_RANGE",
    "VOCAL_KEYWORDS",
    "ErrorKind",
    "Outcome",
    "AnalysisError",
    "MidiNotFoundError",
    "NoVocalTrackError",
    "EmptySelectionError",
]
