from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from assertdiff.writer.base import MessageWriter


class ComparisonResult(Protocol):
    """What a failed comparison hands to a writer to explain itself."""

    description: str
    actual_value: Any

    def write_actual_value_to(self, writer: "MessageWriter") -> None:
        ...

    def write_additional_lines_to(self, writer: "MessageWriter") -> None:
        ...


@dataclass(frozen=True)
class ConstraintResult:
    description: str
    actual_value: Any = None
    actual_writer: Callable[["MessageWriter"], None] | None = None
    additional_lines_writer: Callable[["MessageWriter"], None] | None = None

    def write_actual_value_to(self, writer: "MessageWriter") -> None:
        if self.actual_writer is not None:
            self.actual_writer(writer)
        else:
            writer.write_actual_value(self.actual_value)

    def write_additional_lines_to(self, writer: "MessageWriter") -> None:
        if self.additional_lines_writer is not None:
            self.additional_lines_writer(writer)

    def write_message_to(self, writer: "MessageWriter") -> None:
        writer.display_differences(self)
