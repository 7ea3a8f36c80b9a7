"""Position of the zero baseline within a tick sequence."""

from collections.abc import Sequence

from axis_intervals.models import IntervalStage, InvalidInput
from axis_intervals.utils.axis_utils import get_interval_size


def get_zero_index(ticks: Sequence[float]) -> float:
    """
    Index at which zero falls in ``ticks``.

    Fractional when zero lies between ticks, negative when it is below the
    first tick and past the last index when it is above the last one.
    Assumes a uniform step.
    """
    ticks = list(ticks)
    if len(ticks) < 2:
        raise InvalidInput(
            "Zero index needs at least two ticks",
            stage=IntervalStage.ZERO_LOCATE,
            error_type="too_few_ticks",
            details={"received": len(ticks)},
        )

    interval = get_interval_size(ticks)
    if interval == 0:
        raise InvalidInput(
            "Zero index needs a non-zero step between ticks",
            stage=IntervalStage.ZERO_LOCATE,
            error_type="zero_step",
            details={"first": ticks[0], "second": ticks[1]},
        )
    if 0 in ticks:
        return float(ticks.index(0))
    if ticks[0] > 0:
        # Zero is below the chart
        return -ticks[0] / interval
    # Zero is above the chart
    return -ticks[-1] / interval + (len(ticks) - 1)
