"""NoteEvent data class - the fundamental unit of symbolic analysis."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoteEvent:
    """Represents a note read from a MIDI track, in ticks."""

    pitch: int  # MIDI pitch (0-127)
    start_tick: int  # Absolute start position in ticks
    duration_ticks: int  # Length in ticks
    velocity: int = 64  # MIDI velocity (0-127)
    channel: int = 0

    @property
    def end_tick(self) -> int:
        """Absolute end position in ticks."""
        return self.start_tick + self.duration_ticks

    @property
    def pitch_class(self) -> int:
        """Get pitch class (0-11, where 0=C)."""
        return self.pitch % 12
