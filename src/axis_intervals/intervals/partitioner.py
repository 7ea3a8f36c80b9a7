"""Nice partitioning of a single-digit-scale range."""

from __future__ import annotations

import logging
import math

from axis_intervals import config
from axis_intervals.utils.rounding import float_to_fixed

logger = logging.getLogger(__name__)


def _choose_partition(
    span: float,
    upper_bound: float,
    lower_bound: float,
    normalized_min: float,
) -> tuple[float, int, float]:
    """Pick (lower_bound, part_count, step_size) for a padded range."""
    if span > config.WIDE_RANGE_THRESHOLD:
        # Too many unit steps: force an even span and use steps of two
        if span % config.WIDE_RANGE_STEP != 0:
            upper_bound += 1
            span = float_to_fixed(upper_bound - lower_bound)
        part_count = math.ceil(span / config.WIDE_RANGE_STEP)
        return lower_bound, part_count, float(config.WIDE_RANGE_STEP)

    if span <= config.NARROW_RANGE_THRESHOLD:
        step_size = span / config.NARROW_RANGE_PARTS
        # Lift the floor one step for low-variance data when it stays below the minimum
        if float_to_fixed(lower_bound + step_size * 2) <= normalized_min:
            lower_bound += step_size
        return lower_bound, config.NARROW_RANGE_PARTS, step_size

    return lower_bound, math.ceil(span), float(config.DEFAULT_STEP)


def range_intervals(normalized_max: float, normalized_min: float = 0.0) -> list[float]:
    """
    Tick values for a range already scaled to roughly [0, 10).

    The bounds are padded by ``config.BOUND_PADDING`` so data sitting exactly
    on a bound is not clipped. Emission stops at the first tick above
    ``normalized_max``, so fewer than ``part_count + 1`` ticks may come back.
    Ticks that collapse onto their predecessor after rounding are dropped.
    """
    if normalized_max == 0:
        # All-zero data: fixed layout, emitted in full
        return [
            float_to_fixed(config.ZERO_RANGE_STEP * i)
            for i in range(config.ZERO_RANGE_PARTS + 1)
        ]

    upper_bound = float_to_fixed(normalized_max + config.BOUND_PADDING)
    if normalized_min < config.MIN_ANCHOR_THRESHOLD:
        lower_bound = 0.0
    else:
        lower_bound = float_to_fixed(normalized_min - config.BOUND_PADDING)
    span = float_to_fixed(upper_bound - lower_bound)

    lower_bound, part_count, step_size = _choose_partition(
        span, upper_bound, lower_bound, normalized_min
    )
    logger.debug(
        f"Partitioning span {span} from {lower_bound}: {part_count} parts of {step_size}"
    )

    ticks: list[float] = []
    for i in range(part_count + 1):
        tick = float_to_fixed(lower_bound + step_size * i)
        if ticks and tick <= ticks[-1]:
            continue
        ticks.append(tick)
        if tick > normalized_max:
            break
    return ticks
