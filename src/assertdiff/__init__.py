from .layout import PREFIX_LENGTH
from .results import ComparisonResult, ConstraintResult
from .writer import MessageWriter, StreamSink, StringSink, TextMessageWriter

__version__ = "0.1.0"

__all__ = [
    "ComparisonResult",
    "ConstraintResult",
    "MessageWriter",
    "PREFIX_LENGTH",
    "StreamSink",
    "StringSink",
    "TextMessageWriter",
    "__version__",
]
