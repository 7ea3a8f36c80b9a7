from .axis import AxisDescriptor, AxisIntervals, NormalizedNumber, SignRegion
from .errors import IntervalStage, InvalidInput

__all__ = [
    "AxisDescriptor",
    "AxisIntervals",
    "IntervalStage",
    "InvalidInput",
    "NormalizedNumber",
    "SignRegion",
]
