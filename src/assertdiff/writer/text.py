from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from assertdiff.errors import MessageFormatError
from assertdiff.formatting.escaping import escape_control_chars, escape_null_characters
from assertdiff.formatting.typenames import TypeLabels, resolve_type_labels
from assertdiff.formatting.values import DEFAULT_MAX_ITEMS, format_collection, format_value
from assertdiff.layout import (
    DEFAULT_LINE_LENGTH,
    MIN_LINE_LENGTH,
    PFX_ACTUAL,
    PFX_DIFFERENCE,
    PFX_EXPECTED,
    PREFIX_LENGTH,
)
from assertdiff.numerics.difference import NOT_A_NUMBER, difference
from assertdiff.numerics.tolerance import Tolerance, ToleranceMode
from assertdiff.results import ComparisonResult
from assertdiff.strings.clipping import caret_line, clip_expected_and_actual, find_mismatch_position

from .base import MessageWriter
from .sinks import Sink, StringSink

if TYPE_CHECKING:
    from assertdiff.config.models import WriterSettings


def _needs_type_labels(expected: Any, actual: Any) -> bool:
    return (
        expected is not None
        and actual is not None
        and type(expected) is not type(actual)
        and format_value(expected) == format_value(actual)
    )


class TextMessageWriter(MessageWriter):
    """Writes failure messages in the standard Expected / But was layout.

    A writer holds per-call state (the type labels used when two values
    look identical), so one instance must not be shared between threads.
    """

    def __init__(self, sink: Sink | None = None, user_message: str | None = None, *args: Any) -> None:
        self.sink: Sink = sink if sink is not None else StringSink()
        self._max_line_length = DEFAULT_LINE_LENGTH
        self._type_labels: TypeLabels | None = None
        if user_message:
            self.write_message_line(0, user_message, *args)

    @classmethod
    def from_settings(cls, settings: "WriterSettings", sink: Sink | None = None) -> "TextMessageWriter":
        writer = cls(sink)
        writer.max_line_length = settings.max_line_length
        return writer

    @property
    def max_line_length(self) -> int:
        return self._max_line_length

    @max_line_length.setter
    def max_line_length(self, value: int) -> None:
        if value < MIN_LINE_LENGTH:
            raise ValueError(f"max_line_length must be at least {MIN_LINE_LENGTH}, got {value}")
        self._max_line_length = value

    def getvalue(self) -> str:
        if not isinstance(self.sink, StringSink):
            raise TypeError("Writer output is only buffered when writing to a StringSink")
        return self.sink.getvalue()

    def write(self, text: str) -> None:
        self.sink.write(text)

    def write_line(self, text: str = "") -> None:
        self.sink.write_line(text)

    # High level

    def write_message_line(self, level: int, message: str, *args: Any) -> None:
        if args:
            try:
                message = message.format(*args)
            except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
                raise MessageFormatError(message=message, arg_count=len(args), reason=str(exc)) from exc
        self.write("  " * level)
        self.write_line(escape_null_characters(message))

    def display_differences(self, result: ComparisonResult) -> None:
        self._type_labels = None
        self._write_expected_description(result)
        self._write_actual_result(result)
        result.write_additional_lines_to(self)

    def display_value_differences(
        self,
        expected: Any,
        actual: Any,
        tolerance: Tolerance | None = None,
    ) -> None:
        self._type_labels = None
        if _needs_type_labels(expected, actual):
            self._type_labels = resolve_type_labels(expected, actual)

        self._write_expected_value(expected, tolerance)
        self._write_actual_line(actual)
        if tolerance is not None:
            self._write_difference_line(expected, actual, tolerance)

    def display_string_differences(
        self,
        expected: str,
        actual: str,
        mismatch: int,
        ignore_case: bool,
        clip: bool,
    ) -> None:
        self._type_labels = None
        max_display_length = self.max_line_length - PREFIX_LENGTH - 2

        if clip:
            expected, actual = clip_expected_and_actual(expected, actual, max_display_length, mismatch)

        expected = escape_control_chars(expected)
        actual = escape_control_chars(actual)

        # Clipping and escaping both move characters, so the caller's index is stale here.
        mismatch = find_mismatch_position(expected, actual, 0, ignore_case)

        self.write(PFX_EXPECTED)
        self.write(f'"{expected}"')
        if ignore_case:
            self.write(", ignoring case")
        self.write_line()
        self.write(PFX_ACTUAL)
        self.write_line(f'"{actual}"')
        if mismatch >= 0:
            self.write_line(caret_line(mismatch))

    # Low level

    def write_actual_value(self, actual: Any) -> None:
        self.write_value(actual)

    def write_value(self, value: Any) -> None:
        self.write(format_value(value))

    def write_collection_elements(
        self,
        collection: Iterable[Any],
        start: int = 0,
        max_count: int = DEFAULT_MAX_ITEMS,
    ) -> None:
        self.write(format_collection(collection, start, max_count))

    # Helpers

    def _write_expected_description(self, result: ComparisonResult) -> None:
        self.write(PFX_EXPECTED)
        self.write_line(result.description)

    def _write_actual_result(self, result: ComparisonResult) -> None:
        self.write(PFX_ACTUAL)
        result.write_actual_value_to(self)
        self.write_line()

    def _write_expected_value(self, expected: Any, tolerance: Tolerance | None) -> None:
        self.write(PFX_EXPECTED)
        self.write_value(expected)
        if self._type_labels is not None:
            self.write(self._type_labels.expected)
        if tolerance is not None and tolerance.has_variance:
            self.write(" +/- ")
            self.write_value(tolerance.amount)
            if tolerance.mode is not ToleranceMode.LINEAR:
                self.write(f" {tolerance.mode.value}")
        self.write_line()

    def _write_actual_line(self, actual: Any) -> None:
        self.write(PFX_ACTUAL)
        self.write_actual_value(actual)
        if self._type_labels is not None:
            self.write(self._type_labels.actual)
        self.write_line()

    def _write_difference_line(self, expected: Any, actual: Any, tolerance: Tolerance) -> None:
        # Only absolute and percentage differences mean anything to a reader.
        if tolerance.mode not in {ToleranceMode.LINEAR, ToleranceMode.PERCENT}:
            return

        value = difference(expected, actual, tolerance.mode)
        if value is NOT_A_NUMBER:
            return

        self.write(PFX_DIFFERENCE)
        self.write_value(value)
        if tolerance.mode is not ToleranceMode.LINEAR:
            self.write(f" {tolerance.mode.value}")
        self.write_line()
