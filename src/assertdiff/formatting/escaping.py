from __future__ import annotations

_ESCAPES = {
    "\\": "\\\\",
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\x85": "\\x0085",
    "\u2028": "\\x2028",
    "\u2029": "\\x2029",
}

_ESCAPE_TABLE = str.maketrans(_ESCAPES)


def escape_control_chars(text: str) -> str:
    """Replace control characters with visible backslash escapes.

    The result never contains a character that would break a line or be
    swallowed by a terminal, so it is safe to embed in a single output line.
    """
    return text.translate(_ESCAPE_TABLE)


def escape_null_characters(text: str) -> str:
    return text.replace("\0", "\\0")
