"""Score container - tracks and note events read from a MIDI file."""

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

import mido

from ..core import NoteEvent, DEFAULT_TICKS_PER_QUARTER
from .tempo import TempoMap


@dataclass(frozen=True)
class Track:
    """A named track and its note events in order of appearance."""

    index: int
    name: str
    notes: Tuple[NoteEvent, ...] = ()

    @property
    def note_count(self) -> int:
        return len(self.notes)


@dataclass
class Score:
    """In-memory view of a MIDI file, measured in ticks."""

    path: str
    tracks: List[Track]
    ticks_per_quarter_note: int
    tempo_map: TempoMap
    last_event_tick: int = 0

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def extract_notes(self, track_index: int) -> List[NoteEvent]:
        """
        Get the note events of a track.

        Notes are in note-on order, which is not guaranteed to be sorted
        by start tick.

        Returns:
            List of notes; empty for an out-of-range index or a track
            without notes
        """
        if track_index < 0 or track_index >= len(self.tracks):
            return []
        return list(self.tracks[track_index].notes)

    @property
    def duration(self) -> float:
        """Time of the last event in seconds."""
        return self.tempo_map.tick_to_seconds(self.last_event_tick)

    @classmethod
    def from_midi_file(
        cls,
        midi: mido.MidiFile,
        path: str = "",
        default_ticks_per_quarter: int = DEFAULT_TICKS_PER_QUARTER,
    ) -> "Score":
        """Build a Score from a parsed mido MidiFile."""
        tpq = resolve_ticks_per_quarter(midi.ticks_per_beat, default_ticks_per_quarter)

        tracks = []
        last_tick = 0
        for index, midi_track in enumerate(midi.tracks):
            tracks.append(Track(
                index=index,
                name=track_name(midi_track, index),
                notes=tuple(read_track_notes(midi_track)),
            ))
            last_tick = max(last_tick, last_event_tick(midi_track))

        return cls(
            path=path,
            tracks=tracks,
            ticks_per_quarter_note=tpq,
            tempo_map=TempoMap.from_tracks(midi.tracks, tpq),
            last_event_tick=last_tick,
        )


def resolve_ticks_per_quarter(division: Optional[int], default: int = DEFAULT_TICKS_PER_QUARTER) -> int:
    """Ticks per quarter note from a header time division.

    SMPTE divisions (top bit set) and missing or non-positive values fall
    back to the default.
    """
    if not division or division <= 0 or division & 0x8000:
        return default
    return int(division)


def decode_meta_text(text: str) -> str:
    """
    Recover UTF-8 meta text that mido decoded as latin-1.

    Text that is not valid UTF-8 (plain latin-1 names) or that was never
    latin-1 decoded is returned unchanged.
    """
    try:
        return text.encode("latin-1").decode("utf-8")
    except UnicodeError:
        return text


def track_name(track: mido.MidiTrack, index: int) -> str:
    """First track_name meta text, or 'Track N' (1-based) if none."""
    for msg in track:
        if msg.type == "track_name":
            return decode_meta_text(msg.name)
    return f"Track {index + 1}"


def last_event_tick(track: mido.MidiTrack) -> int:
    """Absolute tick of the last event, not counting end_of_track."""
    tick = 0
    last = 0
    for msg in track:
        tick += msg.time
        if msg.type != "end_of_track":
            last = tick
    return last


def read_track_notes(track: mido.MidiTrack) -> List[NoteEvent]:
    """
    Pair note-on/note-off messages into NoteEvents.

    A note_off (or note_on with velocity 0) closes the oldest open note
    with the same channel and pitch. Notes left open at the end of the
    track are dropped.

    Returns:
        Notes in note-on order
    """
    open_notes = defaultdict(deque)
    starts = []
    ends: List[Optional[int]] = []

    tick = 0
    for msg in track:
        tick += msg.time
        if msg.type == "note_on" and msg.velocity > 0:
            open_notes[(msg.channel, msg.note)].append(len(starts))
            starts.append((msg.note, tick, msg.velocity, msg.channel))
            ends.append(None)
        elif msg.type == "note_off" or (msg.type == "note_on" and msg.velocity == 0):
            pending = open_notes.get((msg.channel, msg.note))
            if pending:
                ends[pending.popleft()] = tick

    notes = []
    for (pitch, start, velocity, channel), end in zip(starts, ends):
        if end is None:
            continue
        notes.append(NoteEvent(
            pitch=pitch,
            start_tick=start,
            duration_ticks=end - start,
            velocity=velocity,
            channel=channel,
        ))
    return notes
