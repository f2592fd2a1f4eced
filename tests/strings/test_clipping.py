from __future__ import annotations

import pytest

from assertdiff.layout import PREFIX_LENGTH
from assertdiff.strings import caret_line, clip_expected_and_actual, clip_string, find_mismatch_position


def test_find_mismatch_position() -> None:
    assert find_mismatch_position("abc", "abd", 0, False) == 2
    assert find_mismatch_position("abc", "abc", 0, False) == -1
    assert find_mismatch_position("ABC", "abc", 0, True) == -1
    assert find_mismatch_position("ABC", "abc", 0, False) == 0


def test_find_mismatch_position_reports_end_of_shorter_string() -> None:
    assert find_mismatch_position("abc", "abcd") == 3
    assert find_mismatch_position("", "x") == 0


def test_find_mismatch_position_honours_start_offset() -> None:
    assert find_mismatch_position("xbc", "abd", 1) == 2


def test_short_strings_are_not_clipped() -> None:
    assert clip_expected_and_actual("abc", "abd", 20, 2) == ("abc", "abd")


def test_clipping_keeps_mismatch_visible() -> None:
    expected = "a" * 150 + "X" + "b" * 49
    actual = "a" * 150 + "Y" + "b" * 49

    clipped_expected, clipped_actual = clip_expected_and_actual(expected, actual, 20, 150)

    assert len(clipped_expected) == 20
    assert len(clipped_actual) == 20
    assert clipped_expected.startswith("...") and clipped_expected.endswith("...")
    mismatch = find_mismatch_position(clipped_expected, clipped_actual)
    assert mismatch == 10
    assert clipped_expected[mismatch] == "X"
    assert clipped_actual[mismatch] == "Y"


def test_clipping_shows_tails_when_mismatch_is_near_the_end() -> None:
    expected = "x" * 30
    actual = "x" * 29 + "y"

    clipped_expected, clipped_actual = clip_expected_and_actual(expected, actual, 20, 29)

    assert clipped_expected == "..." + "x" * 17
    assert clipped_actual == "..." + "x" * 16 + "y"


def test_clipping_from_the_start_only_adds_trailing_ellipsis() -> None:
    expected = "ab" + "c" * 40
    actual = "aX" + "c" * 40

    clipped_expected, clipped_actual = clip_expected_and_actual(expected, actual, 10, 1)

    assert clipped_expected == "abccccc..."
    assert clipped_actual == "aXccccc..."


def test_narrowest_window_still_shows_mismatch() -> None:
    expected = "a" * 50 + "X" + "a" * 50
    actual = "a" * 101

    assert clip_expected_and_actual(expected, actual, 7, 50) == ("...X...", "...a...")
    assert clip_expected_and_actual(expected, actual, 9, 50) == ("...aXa...", "...aaa...")


def test_clip_string() -> None:
    assert clip_string("0123456789", 8, 0) == "01234..."
    assert clip_string("0123456789", 8, 5) == "...56789"
    assert clip_string("0123456789", 8, 2) == "...23..."


def test_clip_rejects_too_small_display_length() -> None:
    with pytest.raises(ValueError):
        clip_string("0123456789", 6, 0)
    with pytest.raises(ValueError):
        clip_expected_and_actual("0123456789", "0123456780", 4, 9)


def test_caret_line_dash_count() -> None:
    line = caret_line(3)

    assert PREFIX_LENGTH == 12
    assert line == "  " + "-" * 14 + "^"
    assert line.index("^") == PREFIX_LENGTH + 1 + 3


def test_caret_line_with_custom_prefix_length() -> None:
    assert caret_line(0, prefix_length=4) == "  ---^"
