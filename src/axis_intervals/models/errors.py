"""Error types raised on precondition violations."""

from __future__ import annotations

from enum import Enum
from typing import Any


class IntervalStage(str, Enum):
    NORMALIZE = "normalize"
    COMPOSE = "compose"
    ORCHESTRATE = "orchestrate"
    ZERO_LOCATE = "zero_locate"
    AXIS_UTILS = "axis_utils"


class InvalidInput(ValueError):
    """
    Raised when an operation is called outside its documented domain.

    Carries the stage that rejected the input, a short machine-readable
    ``error_type`` and optional diagnostic ``details``.
    """

    def __init__(
        self,
        message: str,
        stage: IntervalStage,
        error_type: str,
        details: dict[str, Any] | None = None,
    ):
        self.stage = stage
        self.error_type = error_type
        self.details = details or {}

        full_message = f"[{stage.value}] {message}"
        if self.details:
            full_message += " (" + ", ".join(f"{k}={v!r}" for k, v in self.details.items()) + ")"

        super().__init__(full_message)
