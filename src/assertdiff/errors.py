from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MessageFormatError(ValueError):
    message: str
    arg_count: int
    reason: str

    def __str__(self) -> str:
        return (
            f"Unable to format message line with {self.arg_count} argument(s): "
            f"{self.reason}: {self.message!r}"
        )
