from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from assertdiff.formatting.values import DEFAULT_MAX_ITEMS
from assertdiff.numerics.tolerance import Tolerance
from assertdiff.results import ComparisonResult


class MessageWriter(ABC):
    """Line-oriented writer for assertion failure messages.

    Constraints write through the high-level ``display_*`` methods, and may
    call the low-level ``write_*`` primitives from their result callbacks to
    control how their own values are rendered.
    """

    @property
    @abstractmethod
    def max_line_length(self) -> int:
        ...

    @max_line_length.setter
    @abstractmethod
    def max_line_length(self, value: int) -> None:
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        ...

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        ...

    @abstractmethod
    def write_message_line(self, level: int, message: str, *args: Any) -> None:
        ...

    @abstractmethod
    def display_differences(self, result: ComparisonResult) -> None:
        ...

    @abstractmethod
    def display_value_differences(
        self,
        expected: Any,
        actual: Any,
        tolerance: Tolerance | None = None,
    ) -> None:
        ...

    @abstractmethod
    def display_string_differences(
        self,
        expected: str,
        actual: str,
        mismatch: int,
        ignore_case: bool,
        clip: bool,
    ) -> None:
        ...

    @abstractmethod
    def write_actual_value(self, actual: Any) -> None:
        ...

    @abstractmethod
    def write_value(self, value: Any) -> None:
        ...

    @abstractmethod
    def write_collection_elements(
        self,
        collection: Iterable[Any],
        start: int = 0,
        max_count: int = DEFAULT_MAX_ITEMS,
    ) -> None:
        ...
