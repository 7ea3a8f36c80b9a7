# Rounding
DEFAULT_DECIMALS = 1

# Padding added above the max (and below the min) before partitioning
BOUND_PADDING = 0.1

# A lower bound is only anchored at the data minimum from this normalized value up
MIN_ANCHOR_THRESHOLD = 1.0

# Wide ranges: fewer, larger parts
WIDE_RANGE_THRESHOLD = 5
WIDE_RANGE_STEP = 2

# Narrow ranges: fixed part count, fractional step
NARROW_RANGE_THRESHOLD = 2
NARROW_RANGE_PARTS = 4

# All-zero data
ZERO_RANGE_PARTS = 5
ZERO_RANGE_STEP = 1

# Default step for everything in between
DEFAULT_STEP = 1

# Legacy (mantissa, exponent) sentinels for non-finite input.
# These are IEEE-754 bit patterns read back as a magnitude, not real values.
NAN_SENTINEL_MANTISSA = -6755399441055744
INFINITY_SENTINEL_MANTISSA = 4503599627370496
NON_FINITE_SENTINEL_EXPONENT = 972
