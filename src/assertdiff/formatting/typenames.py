from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TypeLabels:
    """Parenthesized type annotations appended to two identical-looking values."""

    expected: str
    actual: str


def _qualified_parts(value_type: type) -> list[str]:
    return f"{value_type.__module__}.{value_type.__qualname__}".split(".")


def _full_name(value_type: type) -> str:
    return f"{value_type.__module__}.{value_type.__qualname__}"


def resolve_type_names(expected_type: type, actual_type: type) -> tuple[str, str]:
    """Return the shortest pair of dotted names that tells the two types apart.

    Names are compared segment by segment from the right. Both names are cut
    just before the first segment that differs, so ``a.b.Foo`` versus
    ``a.c.Foo`` yields ``b.Foo`` and ``c.Foo``. When the fully qualified names
    are identical (two distinct classes created with the same module and
    qualified name) the fully qualified names are returned as they are.
    """
    expected_parts = _qualified_parts(expected_type)
    actual_parts = _qualified_parts(actual_type)

    expected_index = len(expected_parts) - 1
    actual_index = len(actual_parts) - 1
    while expected_index >= 0 and actual_index >= 0:
        if expected_parts[expected_index] != actual_parts[actual_index]:
            return (
                ".".join(expected_parts[expected_index:]),
                ".".join(actual_parts[actual_index:]),
            )
        expected_index -= 1
        actual_index -= 1

    return _full_name(expected_type), _full_name(actual_type)


def resolve_type_labels(expected: Any, actual: Any) -> TypeLabels:
    expected_name, actual_name = resolve_type_names(type(expected), type(actual))
    return TypeLabels(expected=f" ({expected_name})", actual=f" ({actual_name})")
