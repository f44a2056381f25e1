"""Configuration loading for gfp-doctor (.gfp-doctor.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .utils import read_yaml_file

CONFIG_FILENAME = ".gfp-doctor.yml"
REPORT_FORMATS = ("text", "json")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be used."""


@dataclass
class DoctorConfig:
    """Settings read from .gfp-doctor.yml."""

    package_path: Optional[str] = None
    format: str = "text"
    output: Optional[str] = None
    fail_on_missing: bool = False


def load_config(root: Path) -> DoctorConfig:
    """Load configuration from ``root``; defaults when no file exists."""
    config_file = Path(root) / CONFIG_FILENAME
    try:
        data = read_yaml_file(config_file)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {CONFIG_FILENAME}: {exc}") from exc

    if data is None:
        return DoctorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    report_format = _as_str(data.get("format")) or "text"
    if report_format not in REPORT_FORMATS:
        raise ConfigError(
            f"Unsupported format {report_format!r} in {CONFIG_FILENAME}; expected one of {', '.join(REPORT_FORMATS)}"
        )

    return DoctorConfig(
        package_path=_as_str(data.get("package_path")),
        format=report_format,
        output=_as_str(data.get("output")),
        fail_on_missing=bool(data.get("fail_on_missing", False)),
    )


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
