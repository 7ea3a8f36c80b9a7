"""Single-sign interval computation in the data's own magnitude."""

import math

from axis_intervals.intervals.normalizer import normalize
from axis_intervals.intervals.partitioner import range_intervals
from axis_intervals.models import IntervalStage, InvalidInput
from axis_intervals.utils.rounding import scale_by_power_of_ten


def chart_intervals(max_value: float, min_value: float | None = None) -> list[float]:
    """
    Ticks covering ``[min_value or 0, max_value]`` for non-negative bounds.

    ``max_value`` sets the magnitude; ``min_value`` is rescaled by the same
    power of ten so both bounds are partitioned on one scale. Ticks come back
    from the partitioner rounded in the normalized domain and are shifted
    back exactly, so precision follows the data's magnitude.
    """
    normalized_max, exponent = normalize(max_value)
    normalized_min = scale_by_power_of_ten(min_value, -exponent) if min_value else 0.0

    ticks = [
        scale_by_power_of_ten(tick, exponent)
        for tick in range_intervals(normalized_max, normalized_min)
    ]

    # Data at the edges of the double range can push ticks out of it
    representable = all(math.isfinite(t) for t in ticks) and all(
        a < b for a, b in zip(ticks, ticks[1:])
    )
    if not representable:
        raise InvalidInput(
            "Ticks for this magnitude are not representable as distinct finite floats",
            stage=IntervalStage.COMPOSE,
            error_type="unrepresentable_ticks",
            details={"max_value": max_value, "exponent": exponent},
        )
    return ticks
