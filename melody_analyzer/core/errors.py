"""Error kinds and the Outcome result type.

Expected failures (missing file, no usable vocal track) are reported as an
Outcome carrying an ErrorKind rather than raised. Callers that prefer
exceptions use ``Outcome.unwrap()``, which raises the matching AnalysisError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Terminal failure kinds of an analysis call."""
    NOT_FOUND = "not_found"
    NO_VOCAL_TRACK = "no_vocal_track"
    EMPTY_SELECTION = "empty_selection"


class AnalysisError(Exception):
    """Base class for melody analysis failures."""

    kind: ErrorKind


class MidiNotFoundError(AnalysisError, FileNotFoundError):
    """File is missing or is not a readable MIDI container."""

    kind = ErrorKind.NOT_FOUND


class NoVocalTrackError(AnalysisError):
    """No track in the score contains notes."""

    kind = ErrorKind.NO_VOCAL_TRACK


class EmptySelectionError(AnalysisError):
    """The selected track yielded no notes on re-extraction."""

    kind = ErrorKind.EMPTY_SELECTION


_ERROR_TYPES = {
    ErrorKind.NOT_FOUND: MidiNotFoundError,
    ErrorKind.NO_VOCAL_TRACK: NoVocalTrackError,
    ErrorKind.EMPTY_SELECTION: EmptySelectionError,
}


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or an error kind with a message."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        return cls(error=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the exception matching the error kind."""
        if self.error is not None:
            raise _ERROR_TYPES[self.error](self.message)
        return self.value
