"""Utility helpers for gfp-doctor."""

from .fileio import ManifestParseError, read_json_file, read_yaml_file
from .lookup import contains_text, dig, is_declared
from .versions import less_than_range, satisfies

__all__ = [
    "ManifestParseError",
    "read_json_file",
    "read_yaml_file",
    "contains_text",
    "dig",
    "is_declared",
    "less_than_range",
    "satisfies",
]
