"""Tests for the analysis layer.

Tests cover:
- Pitch range, overlap, density and interval variety
- Rhythm classification and duration weighting
- Interval distribution
- Distribution normalization and ordering
"""

import numpy as np
import pytest

from melody_analyzer.core import NoteEvent
from melody_analyzer.analysis import (
    pitch_range,
    range_overlap,
    note_density,
    melodic_intervals,
    interval_variety,
    sort_by_start,
    RhythmCategory,
    RhythmDistribution,
    RhythmClassifier,
    IntervalCategory,
    IntervalDistribution,
    IntervalAnalyzer,
)


# ============================================================================
# Helpers
# ============================================================================

def notes_from_pitches(pitches, duration=480):
    """One note per pitch, back to back."""
    return [
        NoteEvent(pitch=p, start_tick=i * duration, duration_ticks=duration)
        for i, p in enumerate(pitches)
    ]


def notes_from_durations(durations, pitch=60):
    notes = []
    tick = 0
    for d in durations:
        notes.append(NoteEvent(pitch=pitch, start_tick=tick, duration_ticks=d))
        tick += d
    return notes


# ============================================================================
# Range helpers
# ============================================================================

class TestRange:
    """Tests for range, density and variety helpers."""

    def test_pitch_range(self):
        assert pitch_range(notes_from_pitches([64, 55, 72, 60])) == (55, 72)

    def test_pitch_range_empty(self):
        assert pitch_range([]) == (0, 0)

    def test_range_overlap_inside(self):
        assert range_overlap((55, 72), (48, 84)) == 1.0

    def test_range_overlap_is_inclusive(self):
        # 48..59 overlaps 12 of the 20 pitches in 40..59
        assert range_overlap((40, 59), (48, 84)) == pytest.approx(0.6)
        assert range_overlap((60, 60), (48, 84)) == 1.0

    def test_range_overlap_disjoint(self):
        assert range_overlap((20, 40), (48, 84)) == 0.0

    def test_note_density(self):
        notes = [
            NoteEvent(pitch=60, start_tick=5, duration_ticks=10),
            NoteEvent(pitch=62, start_tick=0, duration_ticks=10),
        ]
        # Sorted by start the span is 0..15
        assert note_density(notes) == pytest.approx(2 / 15)

    def test_note_density_zero_span(self):
        assert note_density([NoteEvent(pitch=60, start_tick=0, duration_ticks=0)]) == 0.0
        assert note_density([]) == 0.0

    def test_melodic_intervals_use_time_order(self):
        notes = [
            NoteEvent(pitch=67, start_tick=960, duration_ticks=480),
            NoteEvent(pitch=60, start_tick=0, duration_ticks=480),
            NoteEvent(pitch=64, start_tick=480, duration_ticks=480),
        ]
        assert melodic_intervals(notes) == [4, 3]

    def test_interval_variety(self):
        # Distinct intervals {1, 2, 3, 4} over 4 intervals
        assert interval_variety(notes_from_pitches([60, 61, 63, 66, 70])) == 1.0
        # One distinct interval, capped denominator of 12
        assert interval_variety(notes_from_pitches([60] * 20)) == pytest.approx(1 / 12)
        assert interval_variety(notes_from_pitches([60])) == 0.0

    def test_sort_by_start_is_stable(self):
        a = NoteEvent(pitch=60, start_tick=0, duration_ticks=1)
        b = NoteEvent(pitch=64, start_tick=0, duration_ticks=1)
        assert sort_by_start([a, b]) == [a, b]
        assert sort_by_start([b, a]) == [b, a]


# ============================================================================
# Rhythm
# ============================================================================

class TestRhythmClassifier:
    """Tests for note value classification."""

    @pytest.mark.parametrize("ticks,expected", [
        (1920, RhythmCategory.WHOLE),
        (3000, RhythmCategory.WHOLE),
        (960, RhythmCategory.HALF),
        (959, RhythmCategory.QUARTER),
        (480, RhythmCategory.QUARTER),
        (240, RhythmCategory.EIGHTH),
        (120, RhythmCategory.SIXTEENTH),
        (119, RhythmCategory.TRIPLET),
        (0, RhythmCategory.TRIPLET),
    ])
    def test_classify(self, ticks, expected):
        assert RhythmClassifier(480).classify(ticks) == expected

    def test_half_boundary(self):
        classifier = RhythmClassifier(96)
        assert classifier.classify(2 * 96) == RhythmCategory.HALF

    def test_quarter_note_distribution(self):
        distribution = RhythmClassifier(480).analyze(notes_from_durations([480]))

        assert distribution[RhythmCategory.QUARTER] == pytest.approx(100.0)
        assert distribution["half"] == 0.0

    def test_weighted_by_duration(self):
        # 480 ticks of quarter, 1440 ticks of half
        distribution = RhythmClassifier(480).analyze(notes_from_durations([480, 1440]))

        assert distribution["quarter"] == pytest.approx(25.0)
        assert distribution["half"] == pytest.approx(75.0)

    def test_empty(self):
        distribution = RhythmClassifier(480).analyze([])

        assert distribution.percentages == (0.0,) * 6
        assert distribution.total == 0.0

    def test_zero_length_notes_give_zero_distribution(self):
        distribution = RhythmClassifier(480).analyze(notes_from_durations([0, 0]))
        assert distribution.total == 0.0

    def test_non_positive_resolution_falls_back(self):
        assert RhythmClassifier(0).ticks_per_quarter == 480
        assert RhythmClassifier(-5).ticks_per_quarter == 480

    def test_sums_to_hundred(self):
        durations = [1920, 960, 480, 240, 120, 60, 480, 240]
        distribution = RhythmClassifier(480).analyze(notes_from_durations(durations))

        assert distribution.total == pytest.approx(100.0)
        assert all(p > 0 for p in distribution.percentages)


# ============================================================================
# Intervals
# ============================================================================

class TestIntervalAnalyzer:
    """Tests for interval distribution."""

    @pytest.mark.parametrize("interval,expected", [
        (0, IntervalCategory.UNISON),
        (1, IntervalCategory.STEP),
        (-2, IntervalCategory.STEP),
        (3, IntervalCategory.SMALL_LEAP),
        (4, IntervalCategory.SMALL_LEAP),
        (5, IntervalCategory.LARGE_LEAP),
        (12, IntervalCategory.LARGE_LEAP),
    ])
    def test_classify(self, interval, expected):
        assert IntervalAnalyzer.classify(interval) == expected

    def test_repeated_pitch_is_all_unison(self):
        distribution = IntervalAnalyzer().analyze(notes_from_pitches([62] * 8))

        assert distribution["unison"] == 100.0
        assert distribution["step"] == 0.0
        assert distribution["small_leap"] == 0.0
        assert distribution["large_leap"] == 0.0

    def test_mixed(self):
        # Intervals: 2 (step), 2 (step), 3 (small leap), 7 (large leap)
        distribution = IntervalAnalyzer().analyze(notes_from_pitches([60, 62, 64, 67, 60]))

        assert distribution[IntervalCategory.STEP] == pytest.approx(50.0)
        assert distribution[IntervalCategory.SMALL_LEAP] == pytest.approx(25.0)
        assert distribution[IntervalCategory.LARGE_LEAP] == pytest.approx(25.0)
        assert distribution.total == pytest.approx(100.0)

    def test_fewer_than_two_notes(self):
        assert IntervalAnalyzer().analyze(notes_from_pitches([60])).total == 0.0
        assert IntervalAnalyzer().analyze([]).total == 0.0


# ============================================================================
# Distribution container
# ============================================================================

class TestCategoryDistribution:
    """Tests for the fixed-category distribution container."""

    def test_as_dict_keeps_category_order(self):
        distribution = IntervalDistribution((10.0, 60.0, 20.0, 10.0))

        assert list(distribution.as_dict()) == ["unison", "step", "small_leap", "large_leap"]

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            RhythmDistribution((100.0,))

    def test_from_weights(self):
        distribution = IntervalDistribution.from_weights(np.array([1.0, 3.0, 0.0, 0.0]))
        assert distribution.percentages == (25.0, 75.0, 0.0, 0.0)

    def test_from_zero_weights(self):
        distribution = IntervalDistribution.from_weights(np.zeros(4))
        assert distribution == IntervalDistribution.empty()

    def test_dominant(self):
        distribution = RhythmDistribution((0.0, 10.0, 40.0, 40.0, 10.0, 0.0))

        assert distribution.dominant(3) == [
            RhythmCategory.QUARTER,
            RhythmCategory.EIGHTH,
            RhythmCategory.HALF,
        ]

    def test_dominant_skips_zero(self):
        distribution = RhythmDistribution((0.0, 0.0, 100.0, 0.0, 0.0, 0.0))
        assert distribution.dominant(3) == [RhythmCategory.QUARTER]

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            IntervalDistribution.empty()["octave"]
