"""MIDI export of an extracted melody."""

import logging
from pathlib import Path
from typing import Sequence, Union

import pretty_midi

from ..core import NoteEvent
from ..input import TempoMap

logger = logging.getLogger(__name__)


class MelodyExporter:
    """Write a note sequence to a single-instrument MIDI file."""

    def __init__(
        self,
        instrument_name: str = "Melody",
        instrument_program: int = 0,
    ):
        """
        Initialize MelodyExporter.

        Args:
            instrument_name: Name written as the track name
            instrument_program: MIDI program number (0-127)
        """
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program

    def notes_to_pretty_midi(
        self,
        notes: Sequence[NoteEvent],
        tempo_map: TempoMap,
    ) -> pretty_midi.PrettyMIDI:
        """
        Convert tick-based notes to a PrettyMIDI object without saving.

        Note positions are converted to seconds through the source tempo
        map; the output carries the source resolution and its initial tempo.
        """
        midi = pretty_midi.PrettyMIDI(
            resolution=tempo_map.ticks_per_quarter,
            initial_tempo=tempo_map.bpm_at(0),
        )

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        for note in sorted(notes, key=lambda n: n.start_tick):
            instrument.notes.append(pretty_midi.Note(
                velocity=note.velocity,
                pitch=note.pitch,
                start=tempo_map.tick_to_seconds(note.start_tick),
                end=tempo_map.tick_to_seconds(note.end_tick),
            ))

        midi.instruments.append(instrument)
        return midi

    def export(
        self,
        notes: Sequence[NoteEvent],
        tempo_map: TempoMap,
        output_path: Union[str, Path],
    ) -> Path:
        """
        Export notes to a MIDI file.

        Args:
            notes: Notes to write
            tempo_map: Tempo map of the file the notes came from
            output_path: Path to output MIDI file

        Returns:
            The written path
        """
        midi = self.notes_to_pretty_midi(notes, tempo_map)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))
        logger.debug("Wrote %d notes to %s", len(notes), output_path)
        return output_path
