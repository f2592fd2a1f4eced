"""Fixed-width line prefixes shared by every failure block.

All prefixes are built from the same label width so that the Expected,
But was and Off by lines line up, and so that caret placement and clipping
can be computed from ``PREFIX_LENGTH`` alone.
"""

from __future__ import annotations

_INDENT = "  "
_LABEL_WIDTH = 10


def _prefix(label: str) -> str:
    if len(label) >= _LABEL_WIDTH:
        raise ValueError(f"Prefix label too long: {label!r}")
    return f"{_INDENT}{label:<{_LABEL_WIDTH}}"


PFX_EXPECTED = _prefix("Expected:")
PFX_ACTUAL = _prefix("But was:")
PFX_DIFFERENCE = _prefix("Off by:")

PREFIX_LENGTH = len(_INDENT) + _LABEL_WIDTH

DEFAULT_LINE_LENGTH = 78
ELLIPSIS = "..."

# Prefix, two quotes, and room for a leading and trailing ellipsis around one character.
MIN_LINE_LENGTH = PREFIX_LENGTH + 2 + 2 * len(ELLIPSIS) + 1
