"""Outcome definitions for rule evaluations."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Outcome(str, Enum):
    """Enumerate the tri-state result of a single rule."""

    PASSED = "passed"
    FAILED = "failed"
    NOT_APPLICABLE = "not-applicable"

    @classmethod
    def coerce(cls, value: Any) -> "Outcome":
        """Map a raw predicate return value onto an outcome.

        ``True`` passes and ``None`` means the rule had no opinion. Any other
        non-true value is treated as a failure.
        """

        if isinstance(value, Outcome):
            return value
        if value is True:
            return cls.PASSED
        if value is None:
            return cls.NOT_APPLICABLE
        return cls.FAILED

    @property
    def is_failure(self) -> bool:
        return self is Outcome.FAILED

    @property
    def label(self) -> str:
        labels = {
            Outcome.PASSED: "PASS",
            Outcome.FAILED: "FAIL",
            Outcome.NOT_APPLICABLE: "N/A",
        }
        return labels[self]
