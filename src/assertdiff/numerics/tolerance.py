from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any

from .kinds import is_numeric


class ToleranceMode(str, Enum):
    NONE = "None"
    LINEAR = "Linear"
    PERCENT = "Percent"
    ULPS = "Ulps"


@dataclass(frozen=True)
class Tolerance:
    amount: Any = 0
    mode: ToleranceMode = ToleranceMode.NONE

    def __post_init__(self) -> None:
        if self.mode in {ToleranceMode.PERCENT, ToleranceMode.ULPS} and not is_numeric(self.amount):
            raise ValueError(f"{self.mode.value} tolerance requires a numeric amount, got {self.amount!r}")
        if is_numeric(self.amount) and self.amount < 0:
            raise ValueError(f"Tolerance amount must not be negative, got {self.amount!r}")
        if isinstance(self.amount, timedelta) and self.amount < timedelta(0):
            raise ValueError(f"Tolerance amount must not be negative, got {self.amount!r}")

    @classmethod
    def default(cls) -> "Tolerance":
        return cls()

    @classmethod
    def exact(cls) -> "Tolerance":
        return cls(0, ToleranceMode.LINEAR)

    @classmethod
    def linear(cls, amount: Any) -> "Tolerance":
        return cls(amount, ToleranceMode.LINEAR)

    @classmethod
    def percent(cls, amount: Any) -> "Tolerance":
        return cls(amount, ToleranceMode.PERCENT)

    @classmethod
    def ulps(cls, amount: Any) -> "Tolerance":
        return cls(amount, ToleranceMode.ULPS)

    @property
    def has_variance(self) -> bool:
        return self.mode is not ToleranceMode.NONE and bool(self.amount)
