from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import CaseFile


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_case_file(path: Path) -> CaseFile:
    if not path.is_file():
        raise FileNotFoundError(f"Case file not found: {path}")
    return CaseFile.model_validate(_load_yaml(path))


def parse_scalar(text: str) -> Any:
    """Read a command-line operand the way YAML would, so ``5`` and ``5.0`` keep their types."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return text
