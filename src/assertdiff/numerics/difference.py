from __future__ import annotations

from datetime import timedelta
import math
from typing import Any, Final

from .kinds import is_duration_pair, is_numeric, widen
from .tolerance import ToleranceMode


class _NotANumber:
    """Marker for operands that cannot be compared numerically."""

    def __repr__(self) -> str:
        return "NOT_A_NUMBER"


NOT_A_NUMBER: Final = _NotANumber()


def _percent_of(delta: Any, expected: Any) -> Any:
    scale = abs(expected)
    if not scale:
        return math.nan if not delta else math.inf
    return delta * 100 / scale


def _duration_difference(expected: Any, actual: Any, mode: ToleranceMode) -> Any:
    try:
        delta = abs(actual - expected)
    except TypeError:
        return NOT_A_NUMBER
    if mode is ToleranceMode.LINEAR:
        return delta
    if not isinstance(expected, timedelta):
        return NOT_A_NUMBER
    return _percent_of(delta, expected)


def difference(expected: Any, actual: Any, mode: ToleranceMode) -> Any:
    """Absolute or percentage difference between ``expected`` and ``actual``.

    Linear mode returns ``|actual - expected|`` in the widest common numeric
    type of the operands, or a ``timedelta`` for durations, dates and
    datetimes. Percent mode returns ``|actual - expected| / |expected| * 100``
    as a plain number. Operands that are not mutually comparable produce
    ``NOT_A_NUMBER`` rather than an error.
    """
    if mode not in {ToleranceMode.LINEAR, ToleranceMode.PERCENT}:
        raise ValueError(f"Cannot calculate a difference for tolerance mode {mode.value}")

    if is_duration_pair(expected, actual):
        return _duration_difference(expected, actual, mode)
    if not (is_numeric(expected) and is_numeric(actual)):
        return NOT_A_NUMBER

    expected, actual = widen(expected, actual)
    delta = abs(actual - expected)
    if mode is ToleranceMode.LINEAR:
        return delta
    return _percent_of(delta, expected)
