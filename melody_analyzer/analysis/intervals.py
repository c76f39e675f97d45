"""Interval distribution - how a melody moves between consecutive notes."""

from enum import Enum
from typing import Sequence

import numpy as np

from ..core import NoteEvent
from .distribution import CategoryDistribution
from .range import melodic_intervals


class IntervalCategory(Enum):
    """Melodic motion buckets by semitone distance."""
    UNISON = "unison"  # 0
    STEP = "step"  # 1-2
    SMALL_LEAP = "small_leap"  # 3-4
    LARGE_LEAP = "large_leap"  # 5+


class IntervalDistribution(CategoryDistribution):
    """Share of consecutive-note intervals per category."""

    categories = IntervalCategory


class IntervalAnalyzer:
    """Classify melodic intervals of a note sequence."""

    @staticmethod
    def classify(interval: int) -> IntervalCategory:
        interval = abs(interval)
        if interval == 0:
            return IntervalCategory.UNISON
        if interval <= 2:
            return IntervalCategory.STEP
        if interval <= 4:
            return IntervalCategory.SMALL_LEAP
        return IntervalCategory.LARGE_LEAP

    def analyze(self, notes: Sequence[NoteEvent]) -> IntervalDistribution:
        """
        Compute the interval distribution.

        Notes are sorted by start tick first; each adjacent pair yields one
        interval.

        Returns:
            IntervalDistribution (all zero for fewer than two notes)
        """
        if len(notes) < 2:
            return IntervalDistribution.empty()

        counts = np.zeros(len(IntervalCategory))
        for interval in melodic_intervals(notes):
            counts[IntervalDistribution.index_of(self.classify(interval))] += 1

        return IntervalDistribution.from_weights(counts)
