"""Evaluate a rule set against a parsed manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .logging import get_logger
from .outcome import Outcome
from .result import Report, RuleResult
from .rules import ExamineOptions, RuleSet
from .utils import read_json_file

logger = get_logger("runner")


def run_rules(
    rule_set: RuleSet,
    document: Any,
    options: Optional[ExamineOptions] = None,
    *,
    found: bool = True,
) -> Report:
    """Run every rule in ``rule_set`` once, in declaration order.

    A missing document (``found=False`` or ``document is None``) yields a
    skipped report and no predicate is called. Predicates guard their own
    field access; the runner never inspects ``document`` itself.
    """

    if not found or document is None:
        return Report.skipped_for(rule_set)

    options = options or ExamineOptions()
    report = Report(name=rule_set.name)
    for rule in rule_set:
        outcome = Outcome.coerce(rule.predicate(document, options))
        logger.debug("%s: %s", rule.id, outcome.value)
        report.add_result(RuleResult.from_rule(rule, outcome))
    return report


def resolve_manifest_path(rule_set: RuleSet, options: ExamineOptions) -> Path:
    return Path(options.root) / (options.package_path or rule_set.default_path)


def examine_manifest(rule_set: RuleSet, options: Optional[ExamineOptions] = None) -> Report:
    """Load the manifest for ``rule_set`` from disk and evaluate it."""

    options = options or ExamineOptions()
    manifest_path = resolve_manifest_path(rule_set, options)
    logger.debug("Examining %s", rule_set.name)
    logger.debug("using %s", manifest_path)

    document = read_json_file(manifest_path)
    if document is None:
        logger.warning("ABORTING: No %s found in %s", rule_set.name, options.root)
        return run_rules(rule_set, None, options, found=False)
    return run_rules(rule_set, document, options)
