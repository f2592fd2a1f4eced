from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal
from fractions import Fraction

import pytest

from assertdiff.formatting import (
    escape_control_chars,
    escape_null_characters,
    format_collection,
    format_value,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "True"),
        (4, "4"),
        (5.0, "5.0d"),
        (0.05, "0.05d"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        (Decimal("1.50"), "1.50m"),
        (Fraction(3, 4), "3/4"),
        ("abc", '"abc"'),
        (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02 03:04:05"),
        (date(2024, 1, 2), "2024-01-02"),
        (timedelta(seconds=90), "0:01:30"),
        (int, "<int>"),
        ((1, "x"), '(1, "x")'),
        ((1,), "(1,)"),
        (b"\x00", "b'\\x00'"),
    ],
)
def test_format_value_scalars(value: object, expected: str) -> None:
    assert format_value(value) == expected


def test_format_value_escapes_control_characters_in_strings() -> None:
    assert format_value("a\0b\nc") == '"a\\0b\\nc"'


def test_format_value_collections() -> None:
    assert format_value([1, 2, 3]) == "< 1, 2, 3 >"
    assert format_value([]) == "<empty>"
    assert format_value(["a", None]) == '< "a", null >'
    assert format_value({"a": 1}) == '< ["a", 1] >'


def test_format_value_truncates_long_collections() -> None:
    assert format_value(list(range(12))) == "< 0, 1, 2, 3, 4, 5, 6, 7, 8, 9... >"


def test_format_value_falls_back_to_str() -> None:
    class Point:
        def __str__(self) -> str:
            return "Point(1, 2)"

    assert format_value(Point()) == "Point(1, 2)"


def test_format_collection_window() -> None:
    assert format_collection(range(20), 5, 3) == "< 5, 6, 7... >"
    assert format_collection([1, 2], 0, 5) == "< 1, 2 >"
    assert format_collection([1, 2], 5, 3) == "<empty>"


def test_format_collection_walks_iterator_once() -> None:
    items = (i for i in range(10))

    assert format_collection(items, 1, 2) == "< 1, 2... >"
    # Items 0..3 were consumed: one skipped, two shown, one to detect truncation.
    assert next(items) == 4


def test_format_collection_rejects_negative_window() -> None:
    with pytest.raises(ValueError):
        format_collection([1], -1, 2)


def test_escape_control_chars() -> None:
    assert escape_control_chars("a\tb") == "a\\tb"
    assert escape_control_chars("back\\slash") == "back\\\\slash"
    assert escape_control_chars("line\u2028sep") == "line\\x2028sep"
    assert escape_control_chars("plain") == "plain"


def test_escape_null_characters_only_touches_nul() -> None:
    assert escape_null_characters("a\0b\n") == "a\\0b\n"
