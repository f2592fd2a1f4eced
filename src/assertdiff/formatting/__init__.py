from .escaping import escape_control_chars, escape_null_characters
from .typenames import TypeLabels, resolve_type_labels, resolve_type_names
from .values import DEFAULT_MAX_ITEMS, format_collection, format_value

__all__ = [
    "DEFAULT_MAX_ITEMS",
    "TypeLabels",
    "escape_control_chars",
    "escape_null_characters",
    "format_collection",
    "format_value",
    "resolve_type_labels",
    "resolve_type_names",
]
