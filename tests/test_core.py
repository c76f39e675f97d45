"""Tests for core types: NoteEvent and the Outcome result type."""

import pytest

from melody_analyzer.core import (
    NoteEvent,
    ErrorKind,
    Outcome,
    AnalysisError,
    MidiNotFoundError,
    NoVocalTrackError,
    EmptySelectionError,
)


class TestNoteEvent:
    """Tests for NoteEvent properties."""

    def test_end_tick(self):
        note = NoteEvent(pitch=60, start_tick=480, duration_ticks=240)
        assert note.end_tick == 720

    def test_pitch_class(self):
        assert NoteEvent(pitch=62, start_tick=0, duration_ticks=1).pitch_class == 2

    def test_defaults(self):
        note = NoteEvent(pitch=60, start_tick=0, duration_ticks=10)
        assert note.velocity == 64
        assert note.channel == 0

    def test_is_immutable(self):
        note = NoteEvent(pitch=60, start_tick=0, duration_ticks=10)
        with pytest.raises(AttributeError):
            note.pitch = 61


class TestOutcome:
    """Tests for Outcome success/failure and unwrap."""

    def test_success(self):
        outcome = Outcome.success(42)
        assert outcome.ok
        assert outcome.value == 42
        assert outcome.error is None
        assert outcome.unwrap() == 42

    def test_failure(self):
        outcome = Outcome.failure(ErrorKind.NOT_FOUND, "missing.mid")
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error is ErrorKind.NOT_FOUND
        assert outcome.message == "missing.mid"

    @pytest.mark.parametrize("kind,exc_type", [
        (ErrorKind.NOT_FOUND, MidiNotFoundError),
        (ErrorKind.NO_VOCAL_TRACK, NoVocalTrackError),
        (ErrorKind.EMPTY_SELECTION, EmptySelectionError),
    ])
    def test_unwrap_raises_matching_error(self, kind, exc_type):
        with pytest.raises(exc_type) as exc_info:
            Outcome.failure(kind, "boom").unwrap()
        assert exc_info.value.kind is kind
        assert str(exc_info.value) == "boom"
        assert isinstance(exc_info.value, AnalysisError)

    def test_success_with_none_value_is_ok(self):
        assert Outcome.success(None).ok


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_not_found_is_file_not_found_error(self):
        assert issubclass(MidiNotFoundError, FileNotFoundError)

    def test_kinds(self):
        assert MidiNotFoundError.kind is ErrorKind.NOT_FOUND
        assert NoVocalTrackError.kind is ErrorKind.NO_VOCAL_TRACK
        assert EmptySelectionError.kind is ErrorKind.EMPTY_SELECTION
