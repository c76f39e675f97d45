"""Analysis layer - quantitative melodic features of a note sequence."""

from .range import (
    PitchRange,
    pitch_range,
    range_overlap,
    note_density,
    melodic_intervals,
    interval_variety,
    sort_by_start,
)
from .distribution import CategoryDistribution
from .rhythm import RhythmCategory, RhythmDistribution, RhythmClassifier
from .intervals import IntervalCategory, IntervalDistribution, IntervalAnalyzer

__all__ = [
    "PitchRange",
    "pitch_range",
    "range_overlap",
    "note_density",
    "melodic_intervals",
    "interval_variety",
    "sort_by_start",
    "CategoryDistribution",
    "RhythmCategory",
    "RhythmDistribution",
    "RhythmClassifier",
    "IntervalCategory",
    "IntervalDistribution",
    "IntervalAnalyzer",
]
