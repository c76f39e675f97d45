"""MIDI file loading."""

import logging
from pathlib import Path
from typing import Union

import mido

from ..core import MidiNotFoundError, DEFAULT_TICKS_PER_QUARTER
from .score import Score

logger = logging.getLogger(__name__)

# Errors mido raises for malformed or truncated files
PARSE_ERRORS = (OSError, EOFError, ValueError, KeyError, IndexError, TypeError)


class MidiLoader:
    """Handles MIDI file loading into a Score."""

    def __init__(self, default_ticks_per_quarter: int = DEFAULT_TICKS_PER_QUARTER):
        """
        Initialize MidiLoader.

        Args:
            default_ticks_per_quarter: Resolution to assume when the header
                does not use a ticks-per-quarter-note time division
        """
        self.default_ticks_per_quarter = default_ticks_per_quarter

    def load(self, path: Union[str, Path]) -> Score:
        """
        Load a MIDI file.

        Args:
            path: Path to MIDI file

        Returns:
            Parsed Score

        Raises:
            MidiNotFoundError: If the file doesn't exist or cannot be parsed
        """
        if not path or not str(path).strip():
            raise MidiNotFoundError("MIDI file path is empty")

        path = Path(path)
        if not path.is_file():
            raise MidiNotFoundError(f"MIDI file not found: {path}")

        try:
            midi = mido.MidiFile(str(path))
        except PARSE_ERRORS as e:
            logger.debug("Failed to parse %s: %s", path, e)
            raise MidiNotFoundError(f"Invalid MIDI file: {path} ({e})") from e

        return Score.from_midi_file(
            midi,
            path=str(path),
            default_ticks_per_quarter=self.default_ticks_per_quarter,
        )
