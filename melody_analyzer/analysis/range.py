"""Pitch range, note density and interval variety helpers.

Shared by the vocal track scorer and the final analysis result.
"""

from typing import List, Sequence, Tuple

from ..core import NoteEvent

PitchRange = Tuple[int, int]


def sort_by_start(notes: Sequence[NoteEvent]) -> List[NoteEvent]:
    """Stable sort by start tick."""
    return sorted(notes, key=lambda n: n.start_tick)


def pitch_range(notes: Sequence[NoteEvent]) -> PitchRange:
    """Return (lowest, highest) MIDI pitch, or (0, 0) if there are no notes."""
    if not notes:
        return (0, 0)
    pitches = [n.pitch for n in notes]
    return (min(pitches), max(pitches))


def range_overlap(track_range: PitchRange, reference: PitchRange) -> float:
    """
    Fraction of a pitch range that lies inside a reference range.

    Both ranges are inclusive, so a single pitch has length 1.

    Returns:
        overlap_length / track_range_length, 0.0 if disjoint
    """
    overlap_min = max(track_range[0], reference[0])
    overlap_max = min(track_range[1], reference[1])
    if overlap_min > overlap_max:
        return 0.0

    overlap = overlap_max - overlap_min + 1
    size = track_range[1] - track_range[0] + 1
    return overlap / size


def note_density(notes: Sequence[NoteEvent]) -> float:
    """Notes per tick between the first onset and the end of the last note."""
    if not notes:
        return 0.0

    ordered = sort_by_start(notes)
    span = ordered[-1].end_tick - ordered[0].start_tick
    if span == 0:
        return 0.0
    return len(notes) / span


def melodic_intervals(notes: Sequence[NoteEvent]) -> List[int]:
    """Absolute semitone distances between consecutive notes in time order."""
    ordered = sort_by_start(notes)
    return [
        abs(ordered[i].pitch - ordered[i - 1].pitch)
        for i in range(1, len(ordered))
    ]


def interval_variety(notes: Sequence[NoteEvent]) -> float:
    """Distinct intervals divided by min(12, note_count - 1)."""
    if len(notes) < 2:
        return 0.0
    distinct = set(melodic_intervals(notes))
    return len(distinct) / min(12, len(notes) - 1)
