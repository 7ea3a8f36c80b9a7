"""Human-friendly axis tick intervals and axis helpers for charts."""

from axis_intervals.intervals import (
    calc_chart_intervals,
    chart_intervals,
    classify_region,
    compute_axis,
    get_zero_index,
    normalize,
    range_intervals,
)
from axis_intervals.models import (
    AxisDescriptor,
    AxisIntervals,
    IntervalStage,
    InvalidInput,
    NormalizedNumber,
    SignRegion,
)
from axis_intervals.utils import (
    calc_distribution,
    float_to_fixed,
    get_closest_in_array,
    get_interval_size,
    get_max_checkpoint,
    get_real_intervals,
    get_value_range,
    is_in_range,
    is_in_range_2d,
    scale,
)

__all__ = [
    # Core
    "calc_chart_intervals",
    "compute_axis",
    "get_zero_index",
    "chart_intervals",
    "range_intervals",
    "normalize",
    "classify_region",
    # Models
    "AxisDescriptor",
    "AxisIntervals",
    "NormalizedNumber",
    "SignRegion",
    # Errors
    "IntervalStage",
    "InvalidInput",
    # Utilities
    "float_to_fixed",
    "get_real_intervals",
    "get_interval_size",
    "get_value_range",
    "scale",
    "is_in_range",
    "is_in_range_2d",
    "get_closest_in_array",
    "calc_distribution",
    "get_max_checkpoint",
]
