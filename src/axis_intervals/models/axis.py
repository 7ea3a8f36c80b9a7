from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class SignRegion(str, Enum):
    """Where a data range lies relative to zero."""

    NON_NEGATIVE = "non_negative"
    STRADDLING = "straddling"
    NON_POSITIVE = "non_positive"


class NormalizedNumber(NamedTuple):
    mantissa: float
    exponent: int


class AxisDescriptor(BaseModel):
    """Value to display-coordinate mapping supplied by chart layout code."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    zero_line: float = Field(alias="zeroLine")
    scale_multiplier: float = Field(alias="scaleMultiplier")


class AxisIntervals(BaseModel):
    ticks: list[float]
    exponent: int
    region: SignRegion
    zero_index: float
    interval_size: float
    value_range: float
