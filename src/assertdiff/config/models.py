from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt

from assertdiff.layout import DEFAULT_LINE_LENGTH, MIN_LINE_LENGTH
from assertdiff.numerics.tolerance import Tolerance, ToleranceMode

_MODES = {
    "linear": ToleranceMode.LINEAR,
    "percent": ToleranceMode.PERCENT,
    "ulps": ToleranceMode.ULPS,
}


class WriterSettings(BaseModel):
    max_line_length: int = Field(default=DEFAULT_LINE_LENGTH, ge=MIN_LINE_LENGTH)

    model_config = ConfigDict(extra="forbid")


class ToleranceSpec(BaseModel):
    mode: Literal["linear", "percent", "ulps"] = "linear"
    amount: NonNegativeInt | NonNegativeFloat

    model_config = ConfigDict(extra="forbid")

    def to_tolerance(self) -> Tolerance:
        return Tolerance(self.amount, _MODES[self.mode])


class ValuesCase(BaseModel):
    kind: Literal["values"]
    id: str
    message: str | None = None
    expected: Any = None
    actual: Any = None
    tolerance: ToleranceSpec | None = None

    model_config = ConfigDict(extra="forbid")


class StringsCase(BaseModel):
    kind: Literal["strings"]
    id: str
    message: str | None = None
    expected: str
    actual: str
    ignore_case: bool = False
    clip: bool = True

    model_config = ConfigDict(extra="forbid")


FailureCase = Annotated[Union[ValuesCase, StringsCase], Field(discriminator="kind")]


class CaseFile(BaseModel):
    settings: WriterSettings = Field(default_factory=WriterSettings)
    cases: list[FailureCase]

    model_config = ConfigDict(extra="forbid")
