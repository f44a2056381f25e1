"""Basic file IO helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class ManifestParseError(ValueError):
    """Raised when a manifest exists but does not contain valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


def read_json_file(path: Path) -> Any:
    """Return the parsed JSON if the file exists, otherwise ``None``."""

    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.is_file():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)
