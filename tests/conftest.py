"""Shared fixtures: small MIDI files written with mido and pretty_midi."""

import mido
import pretty_midi
import pytest


def build_track(name, notes, channel=0, velocity=80):
    """Build a MidiTrack from (pitch, start_tick, duration_ticks) tuples."""
    events = []
    for pitch, start, duration in notes:
        events.append((start, 1, mido.Message(
            "note_on", note=pitch, velocity=velocity, channel=channel)))
        events.append((start + duration, 0, mido.Message(
            "note_off", note=pitch, velocity=0, channel=channel)))
    # note_off before note_on on the same tick
    events.sort(key=lambda e: (e[0], e[1]))

    track = mido.MidiTrack()
    if name:
        track.append(mido.MetaMessage("track_name", name=name, time=0))

    now = 0
    for tick, _, msg in events:
        track.append(msg.copy(time=tick - now))
        now = tick
    return track


def sequential_notes(pitches, duration=480, gap=0):
    """(pitch, start, duration) tuples played one after another."""
    return [
        (pitch, i * (duration + gap), duration)
        for i, pitch in enumerate(pitches)
    ]


@pytest.fixture
def make_track():
    return build_track


@pytest.fixture
def write_midi(tmp_path):
    """Write tracks to a type 1 MIDI file and return its path."""

    def _write(tracks, name="song.mid", ticks_per_beat=480, tempo=500000, charset="latin1"):
        midi = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat, charset=charset)
        for i, track in enumerate(tracks):
            if i == 0 and tempo is not None:
                track.insert(0, mido.MetaMessage("set_tempo", tempo=tempo, time=0))
            midi.tracks.append(track)

        path = tmp_path / name
        midi.save(str(path))
        return path

    return _write


@pytest.fixture
def vocal_pitches():
    """40 pitches between G3 (55) and C5 (72), moving mostly by steps."""
    up = [55, 57, 59, 60, 62, 64, 65, 67, 69, 71, 72]
    down = [71, 69, 67, 65, 64, 62, 60, 59, 57]
    return (up + down) * 2


@pytest.fixture
def song_file(write_midi, vocal_pitches):
    """Bass, lead vocal and pad, the vocal on track 1."""
    bass = build_track("Bass", sequential_notes([36, 43] * 8, duration=960))
    vocal = build_track("Lead Vocal", sequential_notes(vocal_pitches))
    pad = build_track("Pad", sequential_notes([48, 52, 55, 60], duration=3840))
    return write_midi([bass, vocal, pad])


@pytest.fixture
def pretty_midi_file(tmp_path):
    """Two named instruments written with pretty_midi (480 tpq, 120 BPM)."""
    midi = pretty_midi.PrettyMIDI(resolution=480, initial_tempo=120.0)

    vocal = pretty_midi.Instrument(program=52, name="Vocal")
    for i, pitch in enumerate([60, 62, 64, 65]):
        vocal.notes.append(pretty_midi.Note(velocity=90, pitch=pitch, start=i * 0.5, end=(i + 1) * 0.5))

    piano = pretty_midi.Instrument(program=0, name="Piano")
    piano.notes.append(pretty_midi.Note(velocity=70, pitch=48, start=0.0, end=2.0))

    midi.instruments.extend([vocal, piano])
    path = tmp_path / "pretty.mid"
    midi.write(str(path))
    return path
