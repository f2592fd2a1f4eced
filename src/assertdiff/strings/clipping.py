from __future__ import annotations

from assertdiff.layout import ELLIPSIS, PREFIX_LENGTH

_MIN_CLIP_LENGTH = 2 * len(ELLIPSIS) + 1


def _check_clip_length(max_length: int) -> None:
    if max_length < _MIN_CLIP_LENGTH:
        raise ValueError(
            f"Display length {max_length} is too small to clip into; need at least {_MIN_CLIP_LENGTH}"
        )


def find_mismatch_position(expected: str, actual: str, start: int = 0, ignore_case: bool = False) -> int:
    """Index of the first character at which the two strings differ.

    When one string is a prefix of the other the mismatch is reported at the
    end of the shorter one. Equal strings return -1.
    """
    length = min(len(expected), len(actual))
    for index in range(start, length):
        left = expected[index]
        right = actual[index]
        if ignore_case:
            left = left.lower()
            right = right.lower()
        if left != right:
            return index

    if len(expected) != len(actual):
        return length
    return -1


def clip_string(text: str, max_length: int, clip_start: int) -> str:
    """Cut ``text`` to ``max_length`` characters starting at ``clip_start``.

    An ellipsis replaces content removed before ``clip_start`` and after the
    window, and counts towards ``max_length``.
    """
    _check_clip_length(max_length)
    clip_length = max_length
    parts: list[str] = []
    if clip_start > 0:
        clip_length -= len(ELLIPSIS)
        parts.append(ELLIPSIS)

    if len(text) - clip_start > clip_length:
        clip_length -= len(ELLIPSIS)
        parts.append(text[clip_start : clip_start + clip_length])
        parts.append(ELLIPSIS)
    else:
        parts.append(text[clip_start:])
    return "".join(parts)


def clip_expected_and_actual(expected: str, actual: str, max_length: int, mismatch: int) -> tuple[str, str]:
    """Clip both strings to ``max_length`` while keeping ``mismatch`` visible.

    Strings that already fit are returned unchanged. Otherwise the window
    first tries to show the tails of both strings; if that would hide the
    mismatch, the window is placed so the mismatch falls in the middle of the
    characters left between the two ellipses. Both strings share the same
    window start so their characters stay aligned.
    """
    longest = max(len(expected), len(actual))
    if longest <= max_length:
        return expected, actual

    _check_clip_length(max_length)
    clip_length = max_length - len(ELLIPSIS)
    clip_start = longest - clip_length
    if clip_start > mismatch:
        # Centre on the part left visible once both ellipses are in place.
        visible = max_length - 2 * len(ELLIPSIS)
        clip_start = max(0, mismatch - visible // 2)

    return (
        clip_string(expected, max_length, clip_start),
        clip_string(actual, max_length, clip_start),
    )


def caret_line(mismatch: int, prefix_length: int = PREFIX_LENGTH) -> str:
    """Line whose caret sits under the mismatching character of a quoted value.

    The line starts with two blanks, and the dashes cover the rest of the
    prefix, the opening quote and the characters before the mismatch.
    """
    return "  " + "-" * (prefix_length + mismatch - 1) + "^"
