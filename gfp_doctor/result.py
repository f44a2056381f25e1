"""Report data structures produced by the rule runner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Sequence, Tuple

from .outcome import Outcome
from .rules import Rule, RuleSet

OUTCOME_ORDER: Sequence[Outcome] = (
    Outcome.FAILED,
    Outcome.PASSED,
    Outcome.NOT_APPLICABLE,
)


@dataclass
class RuleResult:
    """Capture the outcome of one rule for one run."""

    rule_id: str
    description: str
    error_message: str
    outcome: Optional[Outcome] = None

    @classmethod
    def from_rule(cls, rule: Rule, outcome: Optional[Outcome] = None) -> "RuleResult":
        return cls(
            rule_id=rule.id,
            description=rule.description,
            error_message=rule.error_message,
            outcome=outcome,
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        data = asdict(self)
        data["outcome"] = self.outcome.value if self.outcome else None
        return data


@dataclass
class Summary:
    """Aggregate rule counts by outcome."""

    failed: int = 0
    passed: int = 0
    not_applicable: int = 0

    def increment(self, outcome: Outcome) -> None:
        attr = outcome.name.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return outcome/count pairs ordered for reporting."""

        return [(outcome.label, getattr(self, outcome.name.lower())) for outcome in OUTCOME_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, outcome.name.lower()) for outcome in OUTCOME_ORDER)


@dataclass
class Report:
    """Rule results for one manifest, in declaration order."""

    name: str
    results: List[RuleResult] = field(default_factory=list)
    skipped: bool = False
    summary: Summary = field(default_factory=Summary)

    @classmethod
    def skipped_for(cls, rule_set: RuleSet) -> "Report":
        """Build a report where no rule was evaluated."""

        return cls(
            name=rule_set.name,
            results=[RuleResult.from_rule(rule) for rule in rule_set],
            skipped=True,
        )

    def add_result(self, result: RuleResult) -> None:
        if self.skipped:
            raise ValueError(f"Cannot record outcomes on skipped report {self.name}")
        if result.outcome is None:
            raise ValueError(f"Rule {result.rule_id} has no outcome")
        if result.rule_id in self.outcomes:
            raise ValueError(f"Rule {result.rule_id} already evaluated")
        self.summary.increment(result.outcome)
        self.results.append(result)

    @property
    def outcomes(self) -> Dict[str, Optional[Outcome]]:
        return {result.rule_id: result.outcome for result in self.results}

    @property
    def passed(self) -> bool:
        return self.summary.failed == 0

    def failures(self) -> List[RuleResult]:
        return [result for result in self.results if result.outcome is not None and result.outcome.is_failure]

    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "skipped": self.skipped,
            "passed": self.passed,
            "summary": self.summary.to_dict(),
            "rules": [result.to_dict() for result in self.results],
        }


def format_report(report: Report) -> str:
    """Create a human-readable report for console output."""

    lines: List[str] = []
    title = f"Examining {report.name}"
    lines.append(title)
    lines.append("=" * 40)
    for result in report.results:
        label = result.outcome.label if result.outcome else "SKIP"
        lines.append(f"[{label:<4}] {result.description}")
        if result.outcome is not None and result.outcome.is_failure:
            for line in result.error_message.splitlines():
                lines.append(f"       {line.rstrip()}")
    lines.append("-" * 40)
    if report.skipped:
        lines.append(f"Status    : SKIPPED (no {report.name} found)")
        return "\n".join(lines)
    header = f"{'Outcome':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for label, count in report.summary.as_rows():
        lines.append(f"{label:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if report.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Rules     : {report.summary.total}")
    return "\n".join(lines)
