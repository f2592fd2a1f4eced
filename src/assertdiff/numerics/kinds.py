from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction
import numbers
from typing import Any

_INTEGRAL = 0
_RATIONAL = 1
_DECIMAL = 2
_REAL = 3


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return True
    return isinstance(value, numbers.Real)


def _rank(value: Any) -> int:
    if isinstance(value, numbers.Integral):
        return _INTEGRAL
    if isinstance(value, numbers.Rational):
        return _RATIONAL
    if isinstance(value, Decimal):
        return _DECIMAL
    return _REAL


def widen(expected: Any, actual: Any) -> tuple[Any, Any]:
    """Convert two numeric operands to their widest common representation.

    Integers widen to fractions, fractions and integers to decimals, and
    everything to float. Decimal and Fraction have no exact common form, so
    that pair widens to float.
    """
    ranks = {_rank(expected), _rank(actual)}
    if _REAL in ranks or ranks == {_RATIONAL, _DECIMAL}:
        return float(expected), float(actual)
    if _DECIMAL in ranks:
        return _to_decimal(expected), _to_decimal(actual)
    if _RATIONAL in ranks:
        return Fraction(expected), Fraction(actual)
    return int(expected), int(actual)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(int(value))


def is_duration_pair(expected: Any, actual: Any) -> bool:
    if isinstance(expected, timedelta) and isinstance(actual, timedelta):
        return True
    if isinstance(expected, datetime) and isinstance(actual, datetime):
        return (expected.tzinfo is None) == (actual.tzinfo is None)
    if isinstance(expected, datetime) or isinstance(actual, datetime):
        return False
    return isinstance(expected, date) and isinstance(actual, date)
