"""Nice-number tick generation for chart axes."""

from axis_intervals.intervals.composer import chart_intervals
from axis_intervals.intervals.normalizer import normalize
from axis_intervals.intervals.orchestrator import (
    calc_chart_intervals,
    classify_region,
    compute_axis,
)
from axis_intervals.intervals.partitioner import range_intervals
from axis_intervals.intervals.zero_locator import get_zero_index

__all__ = [
    "calc_chart_intervals",
    "chart_intervals",
    "classify_region",
    "compute_axis",
    "get_zero_index",
    "normalize",
    "range_intervals",
]
