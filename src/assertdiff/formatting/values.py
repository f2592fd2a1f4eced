"""Canonical display strings for values shown in failure messages."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
import math
from typing import Any, Callable

from .escaping import escape_control_chars

DEFAULT_MAX_ITEMS = 10

_NULL = "null"
_EMPTY_COLLECTION = "<empty>"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{float.__repr__(value)}d"


def _format_type(value: type) -> str:
    if value.__module__ == "builtins":
        return f"<{value.__qualname__}>"
    return f"<{value.__module__}.{value.__qualname__}>"


def _format_pair(pair: tuple[Any, Any]) -> str:
    key, value = pair
    return f"[{format_value(key)}, {format_value(value)}]"


def _format_tuple(value: tuple[Any, ...]) -> str:
    if len(value) == 1:
        return f"({format_value(value[0])},)"
    return "(" + ", ".join(format_value(item) for item in value) + ")"


def _format_window(
    items: Iterable[Any],
    start: int,
    max_count: int,
    formatter: Callable[[Any], str],
) -> str:
    count = 0
    parts: list[str] = []
    for index, item in enumerate(items):
        if index < start:
            continue
        count += 1
        if count > max_count:
            break
        parts.append(formatter(item))

    if count == 0:
        return _EMPTY_COLLECTION
    suffix = "..." if count > max_count else ""
    return "< " + ", ".join(parts) + suffix + " >"


def format_value(value: Any) -> str:
    if value is None:
        return _NULL
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return f'"{escape_control_chars(value)}"'
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return f"{value}m"
    if isinstance(value, Fraction):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return str(value)
    if isinstance(value, type):
        return _format_type(value)
    if isinstance(value, (bytes, bytearray)):
        return repr(value)
    if isinstance(value, Mapping):
        return _format_window(value.items(), 0, DEFAULT_MAX_ITEMS, _format_pair)
    if isinstance(value, tuple):
        return _format_tuple(value)
    if isinstance(value, Collection):
        return format_collection(value)
    return str(value)


def format_collection(
    collection: Iterable[Any],
    start: int = 0,
    max_count: int = DEFAULT_MAX_ITEMS,
) -> str:
    """Format up to ``max_count`` elements of ``collection`` from index ``start``.

    The iterable is walked once and only as far as needed, so generators and
    other one-shot iterators are safe to pass. Elements before ``start`` are
    skipped without being formatted, and ``...`` marks elements left out
    after the window.
    """
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if max_count < 0:
        raise ValueError(f"max_count must be non-negative, got {max_count}")
    return _format_window(collection, start, max_count, format_value)
