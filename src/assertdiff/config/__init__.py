from .loader import load_case_file, parse_scalar
from .models import CaseFile, FailureCase, StringsCase, ToleranceSpec, ValuesCase, WriterSettings

__all__ = [
    "CaseFile",
    "FailureCase",
    "StringsCase",
    "ToleranceSpec",
    "ValuesCase",
    "WriterSettings",
    "load_case_file",
    "parse_scalar",
]
