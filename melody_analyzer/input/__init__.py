"""Input layer - MIDI loading and the score container."""

from .loader import MidiLoader
from .score import Score, Track, read_track_notes, resolve_ticks_per_quarter
from .tempo import TempoMap

__all__ = [
    "MidiLoader",
    "Score",
    "Track",
    "TempoMap",
    "read_track_notes",
    "resolve_ticks_per_quarter",
]
