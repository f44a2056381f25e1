"""Optional lookups into parsed manifest documents."""

from __future__ import annotations

from typing import Any, Mapping


def is_declared(value: Any) -> bool:
    """Return whether ``value`` counts as present in a manifest.

    Manifests are written for npm, so presence follows JavaScript truthiness:
    ``""``, ``0``, ``false`` and ``null`` all read as "not declared". Empty
    mappings and lists are still present.
    """

    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


def dig(document: Any, *keys: str) -> Any:
    """Follow ``keys`` through nested mappings.

    Returns ``None`` when any parent is missing or is not a mapping, or when
    the final value is not declared.
    """

    current = document
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if not is_declared(current):
            return None
    return current


def contains_text(value: Any, needle: str) -> bool:
    """Substring check that treats non-text values as not containing ``needle``."""

    return isinstance(value, str) and needle in value
