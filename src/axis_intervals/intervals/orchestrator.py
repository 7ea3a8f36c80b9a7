"""Best-fit axis ticks for a set of data values.

The data's (max, min) is first classified into a sign region; each region has
its own path:

- non-negative: partition [0 or min, max] directly
- straddling: partition the dominant side from zero, then extend the other
  side with the same step
- non-positive: mirror of non-negative, computed on absolute values
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from decimal import Decimal

from axis_intervals.intervals.composer import chart_intervals
from axis_intervals.intervals.normalizer import normalize
from axis_intervals.intervals.zero_locator import get_zero_index
from axis_intervals.models import AxisIntervals, IntervalStage, InvalidInput, SignRegion
from axis_intervals.utils.axis_utils import get_interval_size, get_value_range

logger = logging.getLogger(__name__)

RegionPath = Callable[[float, float, bool], tuple[list[float], int]]


def _negate(value: float) -> float:
    # 0.0 - x never yields -0.0
    return 0.0 - value


def _prepare_values(values: Iterable[float | None], with_minimum: bool) -> list[float]:
    items = list(values)
    if with_minimum:
        items = [v for v in items if v is not None]

    if not items:
        raise InvalidInput(
            "No values to compute intervals from",
            stage=IntervalStage.ORCHESTRATE,
            error_type="empty_values",
        )

    cleaned: list[float] = []
    for idx, value in enumerate(items):
        if value is None:
            raise InvalidInput(
                "Missing value; pass with_minimum=True to skip absent entries",
                stage=IntervalStage.ORCHESTRATE,
                error_type="missing_value",
                details={"index": idx},
            )
        value = float(value)
        if not math.isfinite(value):
            raise InvalidInput(
                "Values must be finite",
                stage=IntervalStage.ORCHESTRATE,
                error_type="non_finite_value",
                details={"index": idx, "value": value},
            )
        cleaned.append(value)
    return cleaned


def classify_region(max_value: float, min_value: float) -> SignRegion:
    if max_value >= 0 and min_value >= 0:
        return SignRegion.NON_NEGATIVE
    if max_value > 0 and min_value < 0:
        return SignRegion.STRADDLING
    return SignRegion.NON_POSITIVE


def _positive_first_intervals(top: float, depth: float) -> list[float]:
    """Ticks for [0, top], extended below zero with the same step until -depth is covered."""
    ticks = chart_intervals(top)
    # Step in decimal so multiples stay clean at any magnitude
    interval_size = Decimal(repr(ticks[1])) - Decimal(repr(ticks[0]))

    below: list[float] = []
    value = Decimal(0)
    while value < depth:
        value += interval_size
        below.append(-float(value))
    return below[::-1] + ticks


def _non_negative_path(
    max_value: float, min_value: float, with_minimum: bool
) -> tuple[list[float], int]:
    exponent = normalize(max_value).exponent
    ticks = chart_intervals(max_value, min_value if with_minimum else None)
    return ticks, exponent


def _straddling_path(
    max_value: float, min_value: float, with_minimum: bool
) -> tuple[list[float], int]:
    # Both sides are measured from zero, so with_minimum has no effect here
    abs_min_value = abs(min_value)
    if max_value >= abs_min_value:
        exponent = normalize(max_value).exponent
        return _positive_first_intervals(max_value, abs_min_value), exponent

    # Negative side dominates: solve the mirror image and flip it back
    exponent = normalize(abs_min_value).exponent
    mirrored = _positive_first_intervals(abs_min_value, max_value)
    return [_negate(tick) for tick in reversed(mirrored)], exponent


def _non_positive_path(
    max_value: float, min_value: float, with_minimum: bool
) -> tuple[list[float], int]:
    pseudo_max_value = abs(min_value)
    pseudo_min_value = abs(max_value)

    exponent = normalize(pseudo_max_value).exponent
    ticks = chart_intervals(pseudo_max_value, pseudo_min_value if with_minimum else None)
    return [_negate(tick) for tick in reversed(ticks)], exponent


_REGION_PATHS: dict[SignRegion, RegionPath] = {
    SignRegion.NON_NEGATIVE: _non_negative_path,
    SignRegion.STRADDLING: _straddling_path,
    SignRegion.NON_POSITIVE: _non_positive_path,
}


def _run(
    values: Iterable[float | None], with_minimum: bool
) -> tuple[list[float], int, SignRegion]:
    data = _prepare_values(values, with_minimum)
    max_value = max(data)
    min_value = min(data)

    region = classify_region(max_value, min_value)
    logger.debug(f"Values span [{min_value}, {max_value}]: region {region.value}")

    ticks, exponent = _REGION_PATHS[region](max_value, min_value, with_minimum)
    return ticks, exponent, region


def calc_chart_intervals(
    values: Iterable[float | None], with_minimum: bool = False
) -> list[float]:
    """
    Strictly increasing "nice" ticks covering every value.

    Without ``with_minimum`` a single-sign axis is anchored at zero; with it,
    absent entries are dropped and the axis may start near the data minimum
    (line charts).
    """
    ticks, _, _ = _run(values, with_minimum)
    return ticks


def compute_axis(values: Iterable[float | None], with_minimum: bool = False) -> AxisIntervals:
    """Ticks plus the derived quantities a renderer needs to draw the axis."""
    ticks, exponent, region = _run(values, with_minimum)
    return AxisIntervals(
        ticks=ticks,
        exponent=exponent,
        region=region,
        zero_index=get_zero_index(ticks),
        interval_size=get_interval_size(ticks),
        value_range=get_value_range(ticks),
    )
