"""Unit tests for magnitude-restoring interval composition."""

import math

import pytest

from axis_intervals.intervals.composer import chart_intervals
from axis_intervals.models import IntervalStage, InvalidInput


class TestChartIntervals:
    def test_tens(self):
        assert chart_intervals(90) == [0, 20, 40, 60, 80, 100]

    def test_hundredths(self):
        """Precision follows the normalized magnitude, not a fixed decimal."""
        assert chart_intervals(0.09) == [0.0, 0.02, 0.04, 0.06, 0.08, 0.1]

    def test_minimum_rescaled_with_max_exponent(self):
        assert chart_intervals(900, 300) == [290, 490, 690, 890, 1090]

    def test_zero_minimum_ignored(self):
        assert chart_intervals(900, 0) == chart_intervals(900)

    def test_all_zero(self):
        assert chart_intervals(0) == [0, 1, 2, 3, 4, 5]

    def test_values_are_clean(self):
        for tick in chart_intervals(0.0037):
            assert tick == round(tick, 5)


class TestMagnitudeEdges:
    def test_large_magnitude_is_clean(self):
        """Ticks are shifted back exactly instead of multiplied and re-rounded."""
        assert chart_intervals(9e16) == [0, 2e16, 4e16, 6e16, 8e16, 1e17]

    def test_large_magnitude_with_minimum(self):
        assert chart_intervals(7e20, 1e20) == [9e19, 2.9e20, 4.9e20, 6.9e20, 8.9e20]

    def test_near_top_of_double_range(self):
        ticks = chart_intervals(1e308)
        assert all(math.isfinite(t) for t in ticks)
        assert ticks[-1] >= 1e308

    def test_overflowing_ticks_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            chart_intervals(1.7e308)
        assert exc_info.value.stage == IntervalStage.COMPOSE
        assert exc_info.value.error_type == "unrepresentable_ticks"

    def test_subnormal_data(self):
        ticks = chart_intervals(1e-310)
        assert all(a < b for a, b in zip(ticks, ticks[1:]))
        assert ticks[-1] >= 1e-310

    def test_collapsing_subnormal_ticks_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            chart_intervals(5e-324)
        assert exc_info.value.error_type == "unrepresentable_ticks"
