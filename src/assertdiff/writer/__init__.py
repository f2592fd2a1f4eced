from .base import MessageWriter
from .sinks import Sink, StreamSink, StringSink
from .text import TextMessageWriter

__all__ = [
    "MessageWriter",
    "Sink",
    "StreamSink",
    "StringSink",
    "TextMessageWriter",
]
