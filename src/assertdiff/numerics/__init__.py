from .difference import NOT_A_NUMBER, difference
from .kinds import is_duration_pair, is_numeric, widen
from .tolerance import Tolerance, ToleranceMode

__all__ = [
    "NOT_A_NUMBER",
    "Tolerance",
    "ToleranceMode",
    "difference",
    "is_duration_pair",
    "is_numeric",
    "widen",
]
