from __future__ import annotations

from typing import Iterable

from assertdiff.config.models import CaseFile, FailureCase, StringsCase, WriterSettings
from assertdiff.strings.clipping import find_mismatch_position
from assertdiff.writer.text import TextMessageWriter


def render_case(case: FailureCase, settings: WriterSettings | None = None) -> str:
    """Render one failure case into a fresh writer and return its text."""
    writer = TextMessageWriter.from_settings(settings or WriterSettings())
    if case.message:
        writer.write_message_line(0, case.message)

    if isinstance(case, StringsCase):
        mismatch = find_mismatch_position(case.expected, case.actual, 0, case.ignore_case)
        writer.display_string_differences(
            case.expected,
            case.actual,
            mismatch,
            case.ignore_case,
            case.clip,
        )
    else:
        tolerance = case.tolerance.to_tolerance() if case.tolerance else None
        writer.display_value_differences(case.expected, case.actual, tolerance)
    return writer.getvalue()


def render_cases(cases: Iterable[FailureCase], settings: WriterSettings | None = None) -> str:
    blocks = [f"{case.id}:\n{render_case(case, settings)}" for case in cases]
    return "\n".join(blocks)


def render_case_file(case_file: CaseFile) -> str:
    return render_cases(case_file.cases, case_file.settings)
