"""Tempo map - convert MIDI tick positions to wall-clock time."""

from bisect import bisect_right
from typing import Iterable, List, Optional, Tuple

import mido

from ..core import DEFAULT_TEMPO_US


class TempoMap:
    """Piecewise-constant tempo over absolute tick positions.

    Tempo values are in microseconds per beat, as stored in ``set_tempo``
    meta messages. Tick 0 always has a tempo; without an explicit change
    there it is 500000 (120 BPM).
    """

    def __init__(
        self,
        ticks_per_quarter: int,
        changes: Optional[Iterable[Tuple[int, int]]] = None,
    ):
        """
        Initialize TempoMap.

        Args:
            ticks_per_quarter: Resolution of the source file
            changes: (absolute_tick, tempo) pairs; later pairs on the same
                tick override earlier ones
        """
        self.ticks_per_quarter = ticks_per_quarter

        points = {0: DEFAULT_TEMPO_US}
        for tick, tempo in changes or []:
            points[max(0, int(tick))] = int(tempo)

        self._ticks = sorted(points)
        self._tempos = [points[t] for t in self._ticks]

        # Seconds elapsed at each change point
        self._seconds = [0.0]
        for i in range(1, len(self._ticks)):
            delta = self._ticks[i] - self._ticks[i - 1]
            self._seconds.append(
                self._seconds[-1]
                + mido.tick2second(delta, ticks_per_quarter, self._tempos[i - 1])
            )

    @classmethod
    def from_tracks(cls, tracks: List[mido.MidiTrack], ticks_per_quarter: int) -> "TempoMap":
        """Collect every set_tempo message across all tracks."""
        changes = []
        tick = 0
        for msg in mido.merge_tracks(tracks):
            tick += msg.time
            if msg.type == "set_tempo":
                changes.append((tick, msg.tempo))
        return cls(ticks_per_quarter, changes)

    def _segment(self, tick: int) -> int:
        return max(0, bisect_right(self._ticks, tick) - 1)

    def tempo_at(self, tick: int) -> int:
        """Tempo (microseconds per beat) active at a tick."""
        return self._tempos[self._segment(tick)]

    def bpm_at(self, tick: int) -> float:
        """Tempo in beats per minute active at a tick."""
        return mido.tempo2bpm(self.tempo_at(tick))

    def tick_to_seconds(self, tick: int) -> float:
        """Convert an absolute tick position to seconds."""
        if tick <= 0:
            return 0.0
        i = self._segment(tick)
        return self._seconds[i] + mido.tick2second(
            tick - self._ticks[i], self.ticks_per_quarter, self._tempos[i]
        )
