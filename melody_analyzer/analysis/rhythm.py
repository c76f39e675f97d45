"""Rhythm classification - distribution of note values by duration."""

from enum import Enum
from typing import Sequence

import numpy as np

from ..core import NoteEvent, DEFAULT_TICKS_PER_QUARTER
from .distribution import CategoryDistribution


class RhythmCategory(Enum):
    """Note-value buckets, longest first."""
    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"
    TRIPLET = "triplet"  # Catch-all for anything shorter than a sixteenth


class RhythmDistribution(CategoryDistribution):
    """Share of total note duration per rhythm category."""

    categories = RhythmCategory


class RhythmClassifier:
    """Bucket note durations into note values and weigh them by length."""

    # Minimum length in quarter notes, checked in order
    THRESHOLDS = (
        (4.0, RhythmCategory.WHOLE),
        (2.0, RhythmCategory.HALF),
        (1.0, RhythmCategory.QUARTER),
        (0.5, RhythmCategory.EIGHTH),
        (0.25, RhythmCategory.SIXTEENTH),
    )

    def __init__(self, ticks_per_quarter: int = DEFAULT_TICKS_PER_QUARTER):
        """
        Initialize RhythmClassifier.

        Args:
            ticks_per_quarter: Resolution of the source file
        """
        if ticks_per_quarter <= 0:
            ticks_per_quarter = DEFAULT_TICKS_PER_QUARTER
        self.ticks_per_quarter = ticks_per_quarter

    def classify(self, duration_ticks: int) -> RhythmCategory:
        """Classify a single duration given in ticks."""
        ratio = duration_ticks / self.ticks_per_quarter
        for minimum, category in self.THRESHOLDS:
            if ratio >= minimum:
                return category
        return RhythmCategory.TRIPLET

    def analyze(self, notes: Sequence[NoteEvent]) -> RhythmDistribution:
        """
        Compute the rhythm distribution of a note sequence.

        Each note contributes its duration in ticks to its bucket; buckets
        are then normalized by the total duration.

        Args:
            notes: Notes of one track

        Returns:
            RhythmDistribution (all zero for no notes)
        """
        if not notes:
            return RhythmDistribution.empty()

        weights = np.zeros(len(RhythmCategory))
        for note in notes:
            category = self.classify(note.duration_ticks)
            weights[RhythmDistribution.index_of(category)] += note.duration_ticks

        return RhythmDistribution.from_weights(weights)
