from __future__ import annotations

import io
from typing import Protocol, TextIO


class Sink(Protocol):
    def write(self, text: str) -> None:
        ...

    def write_line(self, text: str = "") -> None:
        ...


class StreamSink:
    """Sink over any text stream; writes go straight through."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        self.stream.write(text)

    def write_line(self, text: str = "") -> None:
        self.stream.write(text)
        self.stream.write("\n")


class StringSink(StreamSink):
    def __init__(self) -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer)

    def getvalue(self) -> str:
        return self._buffer.getvalue()
