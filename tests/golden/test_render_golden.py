from __future__ import annotations

from pathlib import Path

from assertdiff.config.loader import load_case_file
from assertdiff.render import render_case_file


def test_case_file_matches_golden() -> None:
    golden_dir = Path(__file__).resolve().parent
    case_file = load_case_file(golden_dir / "cases.yaml")

    rendered = render_case_file(case_file)

    assert rendered == (golden_dir / "rendered.txt").read_text(encoding="utf-8")
    assert all(len(line) <= case_file.settings.max_line_length for line in rendered.splitlines())
