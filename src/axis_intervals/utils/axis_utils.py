"""Axis helpers consumed while laying out a chart.

None of these depend on the nice-interval algorithm; they work on any
ordered tick sequence or plain list of values.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from axis_intervals.models import AxisDescriptor, IntervalStage, InvalidInput
from axis_intervals.utils.rounding import float_to_fixed


def _require_items(values: Sequence[float], minimum: int, what: str) -> None:
    if len(values) < minimum:
        raise InvalidInput(
            f"{what} needs at least {minimum} value(s)",
            stage=IntervalStage.AXIS_UTILS,
            error_type="too_few_values",
            details={"received": len(values)},
        )


def get_real_intervals(
    max_value: float,
    count: int,
    min_value: float = 0.0,
    ascending: bool = True,
) -> list[float]:
    """Split ``[min_value, max_value]`` into ``count`` equal parts (``count + 1`` values)."""
    if count < 1:
        raise InvalidInput(
            "Partition count must be positive",
            stage=IntervalStage.AXIS_UTILS,
            error_type="invalid_count",
            details={"count": count},
        )
    part = (max_value - min_value) / count
    intervals = (min_value + part * np.arange(count + 1)).tolist()
    return intervals if ascending else intervals[::-1]


def get_interval_size(ticks: Sequence[float]) -> float:
    _require_items(ticks, 2, "Interval size")
    return ticks[1] - ticks[0]


def get_value_range(ticks: Sequence[float]) -> float:
    _require_items(ticks, 1, "Value range")
    return ticks[-1] - ticks[0]


def scale(value: float, axis: AxisDescriptor | Mapping[str, Any]) -> float:
    """
    Map a data value to a display coordinate.

    Display coordinates grow downwards, so larger values land closer to the
    top: ``zero_line - value * scale_multiplier``.
    """
    if not isinstance(axis, AxisDescriptor):
        axis = AxisDescriptor.model_validate(axis)
    return float_to_fixed(axis.zero_line - value * axis.scale_multiplier)


def is_in_range(value: float, min_value: float, max_value: float) -> bool:
    return min_value < value < max_value


def is_in_range_2d(
    point: Sequence[float],
    min_point: Sequence[float],
    max_point: Sequence[float],
) -> bool:
    return is_in_range(point[0], min_point[0], max_point[0]) and is_in_range(
        point[1], min_point[1], max_point[1]
    )


def get_closest_in_array(
    target: float,
    values: Sequence[float],
    return_index: bool = False,
) -> float | int:
    """
    Value in ``values`` nearest to ``target`` (or its index).

    Ties go to the element seen first.
    """
    _require_items(values, 1, "Closest-value search")
    arr = np.asarray(values, dtype=float)
    idx = int(np.argmin(np.abs(arr - target)))
    if return_index:
        return idx
    return float(arr[idx])


def calc_distribution(values: Sequence[float], count: int) -> list[float]:
    """``count`` evenly spaced checkpoints from 0 up to ``max(values)`` inclusive."""
    _require_items(values, 1, "Distribution")
    if count < 2:
        raise InvalidInput(
            "Distribution needs at least two checkpoints",
            stage=IntervalStage.AXIS_UTILS,
            error_type="invalid_count",
            details={"count": count},
        )
    data_max = float(np.max(values))
    step = 1 / (count - 1)
    return [data_max * (step * i) for i in range(count)]


def get_max_checkpoint(value: float, distribution: Sequence[float]) -> int:
    """Number of checkpoints strictly below ``value``."""
    _require_items(distribution, 1, "Checkpoint lookup")
    return int(np.count_nonzero(np.asarray(distribution, dtype=float) < value))
