from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from assertdiff.config.loader import load_case_file, parse_scalar
from assertdiff.config.models import StringsCase, ToleranceSpec, ValuesCase, WriterSettings
from assertdiff.render import render_case, render_case_file

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _emit(text: str) -> None:
    console.out(text, end="", highlight=False)


def _settings(max_line_length: Optional[int]) -> WriterSettings:
    if max_line_length is None:
        return WriterSettings()
    try:
        return WriterSettings(max_line_length=max_line_length)
    except ValidationError as exc:
        console.print(f"[red]Invalid max line length:[/red] {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1)


@app.command()
def render(
    path: str = typer.Argument(..., help="YAML file describing failure cases"),
    max_line_length: Optional[int] = typer.Option(
        None,
        "--max-line-length",
        help="Override the line length set in the case file",
    ),
) -> None:
    """Render every failure case in a case file."""
    try:
        case_file = load_case_file(Path(path))
    except Exception as exc:
        console.print(f"[red]Failed to load cases:[/red] {exc}")
        raise typer.Exit(code=1)

    if max_line_length is not None:
        case_file = case_file.model_copy(update={"settings": _settings(max_line_length)})
    _emit(render_case_file(case_file))


@app.command()
def strings(
    expected: str = typer.Argument(..., help="Expected string"),
    actual: str = typer.Argument(..., help="Actual string"),
    ignore_case: bool = typer.Option(False, "--ignore-case", help="Compare without regard to case"),
    clip: bool = typer.Option(True, "--clip/--no-clip", help="Clip long strings around the mismatch"),
    max_line_length: Optional[int] = typer.Option(None, "--max-line-length", help="Maximum output line length"),
) -> None:
    """Show where two strings first differ."""
    case = StringsCase(
        kind="strings",
        id="strings",
        expected=expected,
        actual=actual,
        ignore_case=ignore_case,
        clip=clip,
    )
    _emit(render_case(case, _settings(max_line_length)))


@app.command()
def values(
    expected: str = typer.Argument(..., help="Expected value, read as a YAML scalar"),
    actual: str = typer.Argument(..., help="Actual value, read as a YAML scalar"),
    tolerance: Optional[float] = typer.Option(None, "--tolerance", help="Tolerance amount"),
    mode: str = typer.Option("linear", "--mode", help="Tolerance mode (linear, percent, ulps)"),
    max_line_length: Optional[int] = typer.Option(None, "--max-line-length", help="Maximum output line length"),
) -> None:
    """Show an expected and actual value, with the difference when a tolerance is given."""
    tolerance_spec = None
    if tolerance is not None:
        try:
            tolerance_spec = ToleranceSpec.model_validate({"mode": mode, "amount": tolerance})
        except ValidationError as exc:
            console.print(f"[red]Invalid tolerance:[/red] {exc.errors()[0]['msg']}")
            raise typer.Exit(code=1)

    case = ValuesCase(
        kind="values",
        id="values",
        expected=parse_scalar(expected),
        actual=parse_scalar(actual),
        tolerance=tolerance_spec,
    )
    _emit(render_case(case, _settings(max_line_length)))
