"""Unit tests for the silence analyzer."""

import random
from unittest.mock import MagicMock

import pytest

from silencecut.analyzers.silence import analyze, total_duration_ms
from silencecut.errors import InvalidInput
from silencecut.models import SilenceMarker

SEEDS = range(200)


def _scripted(*values: float) -> MagicMock:
    rng = MagicMock()
    rng.random.side_effect = list(values)
    return rng


class TestAnalyzeWalk:
    """The walk alternates a non-silent gap and a silence candidate."""

    def test_accepts_long_candidate(self):
        # gap 0.2 -> 2.0s, candidate 0.5 -> 1.0s, gap 0.99 -> past the end
        rng = _scripted(0.2, 0.5, 0.99)
        markers = analyze(8.0, -40.0, 500, 30.0, rng=rng)
        assert len(markers) == 1
        assert markers[0].start == pytest.approx(2.0)
        assert markers[0].end == pytest.approx(3.0)

    def test_rejects_short_candidate_but_advances(self):
        # gap -> 2.0, candidate 0.2s rejected, gap 0.0 -> 3.2, candidate 1.0s kept
        rng = _scripted(0.2, 0.1, 0.0, 0.5, 0.99)
        markers = analyze(9.0, -40.0, 500, 30.0, rng=rng)
        assert len(markers) == 1
        assert markers[0].start == pytest.approx(3.2)
        assert markers[0].end == pytest.approx(4.2)

    def test_rejects_candidate_past_end(self):
        # gap -> 5.0, candidate 1.8s would end at 6.8 > 6.0
        rng = _scripted(0.8, 0.9)
        assert analyze(6.0, -40.0, 100, 30.0, rng=rng) == []

    def test_zero_length_candidate_never_emitted(self):
        rng = _scripted(0.0, 0.0, 0.99)
        assert analyze(5.0, -40.0, 0, 30.0, rng=rng) == []

    def test_short_sequence_has_no_markers(self):
        # The first gap is at least one second long
        assert analyze(0.9, -40.0, 0, 30.0, rng=random.Random(0)) == []


class TestAnalyzeProperties:
    @pytest.mark.parametrize("min_duration_ms", [0, 250, 500, 1500])
    def test_markers_are_ordered_disjoint_and_bounded(self, min_duration_ms):
        for seed in SEEDS:
            markers = analyze(60.0, -40.0, min_duration_ms, 25.0, rng=random.Random(seed))
            previous_end = 0.0
            for m in markers:
                assert m.start >= 0
                assert m.end > m.start
                assert m.end <= 60.0
                assert m.start >= previous_end
                assert m.duration * 1000 >= min_duration_ms
                previous_end = m.end

    def test_sixty_seconds_half_second_minimum(self):
        for seed in SEEDS:
            for m in analyze(60.0, -40.0, 500, 30.0, rng=random.Random(seed)):
                assert m.end - m.start >= 0.5
                assert m.end <= 60.0

    def test_minimum_above_candidate_range_yields_nothing(self):
        assert analyze(600.0, -40.0, 2000, 30.0, rng=random.Random(7)) == []

    def test_same_seed_same_markers(self):
        a = analyze(120.0, -40.0, 300, 30.0, rng=random.Random(42))
        b = analyze(120.0, -40.0, 300, 30.0, rng=random.Random(42))
        assert a == b


class TestAnalyzeInvalidInput:
    @pytest.mark.parametrize("duration", [0.0, -5.0])
    def test_non_positive_duration(self, duration):
        with pytest.raises(InvalidInput, match="duration must be positive"):
            analyze(duration, -40.0, 500, 30.0)

    def test_negative_min_duration(self):
        with pytest.raises(InvalidInput, match="must not be negative"):
            analyze(60.0, -40.0, -1, 30.0)


class TestTotalDuration:
    def test_sums_spans_in_ms(self):
        markers = [SilenceMarker(10.0, 12.0), SilenceMarker(30.0, 30.5)]
        assert total_duration_ms(markers) == pytest.approx(2500.0)

    def test_empty(self):
        assert total_duration_ms([]) == 0
