"""Fixed-point rounding shared by every interval computation."""

import math
from decimal import ROUND_HALF_UP, Decimal

from axis_intervals import config


def float_to_fixed(value: float, decimals: int = config.DEFAULT_DECIMALS) -> float:
    """
    Round ``value`` to ``decimals`` places, half away from zero.

    Rounding works on the shortest decimal representation of the float
    (``repr``), so 0.15 rounds to 0.2 even though its binary value sits
    just below 0.15. Non-finite values are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    if exact.as_tuple().exponent >= -decimals:
        # Already representable at this precision
        return value + 0.0
    quantum = Decimal(1).scaleb(-decimals)
    rounded = float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
    # Collapse -0.0 so callers never see a signed zero
    return rounded + 0.0


def scale_by_power_of_ten(value: float, exponent: int) -> float:
    """
    ``value * 10**exponent`` computed on the decimal representation.

    Clean decimals stay clean at any magnitude (``4.9`` shifted by 20 is
    exactly the double nearest ``4.9e20``) and no intermediate power of ten
    can underflow to zero or overflow. The result may still be ``inf`` or
    ``0.0`` when it falls outside the double range.
    """
    return float(Decimal(repr(float(value))).scaleb(exponent)) + 0.0
