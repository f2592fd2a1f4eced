from .clipping import caret_line, clip_expected_and_actual, clip_string, find_mismatch_position

__all__ = [
    "caret_line",
    "clip_expected_and_actual",
    "clip_string",
    "find_mismatch_position",
]
