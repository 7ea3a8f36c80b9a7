"""Utility modules for axis-intervals."""

from axis_intervals.utils.axis_utils import (
    calc_distribution,
    get_closest_in_array,
    get_interval_size,
    get_max_checkpoint,
    get_real_intervals,
    get_value_range,
    is_in_range,
    is_in_range_2d,
    scale,
)
from axis_intervals.utils.rounding import float_to_fixed, scale_by_power_of_ten

__all__ = [
    # Rounding
    "float_to_fixed",
    "scale_by_power_of_ten",
    # Tick sequences
    "get_real_intervals",
    "get_interval_size",
    "get_value_range",
    # Coordinates
    "scale",
    "is_in_range",
    "is_in_range_2d",
    # Lookup
    "get_closest_in_array",
    # Distribution
    "calc_distribution",
    "get_max_checkpoint",
]
