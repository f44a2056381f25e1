"""Rule registry data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Tuple

from gfp_doctor.outcome import Outcome


class Predicate(Protocol):
    """Callable implemented by every rule check."""

    def __call__(self, document: Mapping[str, Any], options: "ExamineOptions") -> Optional[Outcome]:
        """Return the outcome of the check for ``document``."""


@dataclass
class ExamineOptions:
    """Bundle inputs shared across predicates and the manifest loader."""

    package_path: Optional[str] = None
    root: Path = field(default_factory=Path.cwd)
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Rule:
    """Immutable rule template: what is checked and how to fix it."""

    id: str
    description: str
    error_message: str
    predicate: Predicate = field(compare=False)


@dataclass(frozen=True)
class RuleSet:
    """Ordered rules targeting one manifest type."""

    name: str
    rules: Tuple[Rule, ...]
    default_path: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        seen = set()
        for rule in self.rules:
            if rule.id in seen:
                raise ValueError(f"Duplicate rule id {rule.id!r} in {self.name}")
            seen.add(rule.id)
        if not self.default_path:
            object.__setattr__(self, "default_path", self.name)

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


__all__ = ["ExamineOptions", "Predicate", "Rule", "RuleSet"]
