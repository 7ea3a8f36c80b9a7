"""Scientific-notation decomposition of axis bounds."""

import math

from axis_intervals import config
from axis_intervals.models import IntervalStage, InvalidInput, NormalizedNumber
from axis_intervals.utils.rounding import scale_by_power_of_ten


def normalize(x: float, *, allow_non_finite: bool = False) -> NormalizedNumber:
    """
    Split ``x`` into ``(mantissa, exponent)`` with ``1 <= |mantissa| < 10``.

    Zero maps to ``(0, 0)``. Non-finite input raises ``InvalidInput`` unless
    ``allow_non_finite`` is set, in which case the legacy bit-pattern
    sentinels from ``config`` are returned instead of a real magnitude.
    """
    x = float(x)
    if x == 0:
        return NormalizedNumber(0.0, 0)

    if not math.isfinite(x):
        if not allow_non_finite:
            raise InvalidInput(
                "Cannot normalize a non-finite value",
                stage=IntervalStage.NORMALIZE,
                error_type="non_finite_value",
                details={"value": x},
            )
        if math.isnan(x):
            return NormalizedNumber(
                float(config.NAN_SENTINEL_MANTISSA), config.NON_FINITE_SENTINEL_EXPONENT
            )
        sign = 1 if x > 0 else -1
        return NormalizedNumber(
            float(sign * config.INFINITY_SENTINEL_MANTISSA), config.NON_FINITE_SENTINEL_EXPONENT
        )

    sign = 1 if x > 0 else -1
    magnitude = abs(x)
    exponent = math.floor(math.log10(magnitude))
    mantissa = scale_by_power_of_ten(magnitude, -exponent)

    # log10 can land one ulp off right at a power of ten
    if mantissa >= 10:
        exponent += 1
        mantissa = scale_by_power_of_ten(magnitude, -exponent)
    elif mantissa < 1:
        exponent -= 1
        mantissa = scale_by_power_of_ten(magnitude, -exponent)

    return NormalizedNumber(sign * mantissa, exponent)
