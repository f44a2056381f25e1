"""npm-compatible version range comparisons."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import nodesemver

from gfp_doctor.logging import get_logger

logger = get_logger("versions")

LOOSE = False
LOWER_BOUND_OPERATORS = ("", "=", ">", ">=")


def satisfies(version: str, range_: Any) -> bool:
    """Return whether ``version`` falls within the npm range ``range_``."""

    if not isinstance(range_, str):
        logger.debug("Ignoring non-text version range %r", range_)
        return False
    try:
        return bool(nodesemver.satisfies(version, range_, loose=LOOSE))
    except ValueError as exc:
        logger.debug("Unparseable version range %r: %s", range_, exc)
        return False


def less_than_range(version: str, range_: Any) -> bool:
    """Return whether ``version`` is lower than every version ``range_`` allows.

    Each ``||`` alternative of the range must have a lower bound above
    ``version``. An alternative bounded only from above (``<4.0.0``) can
    never be cleared, so the answer is ``False``.
    """

    if not isinstance(range_, str):
        logger.debug("Ignoring non-text version range %r", range_)
        return False
    try:
        comparator_sets = nodesemver.make_range(range_, LOOSE).set
    except ValueError as exc:
        logger.debug("Unparseable version range %r: %s", range_, exc)
        return False

    if not comparator_sets:
        return False
    for comparators in comparator_sets:
        bound = _lower_bound(comparators)
        if bound is None:
            return False
        operator, semver = bound
        if operator == ">":
            if nodesemver.gt(version, semver, LOOSE):
                return False
        elif not nodesemver.lt(version, semver, LOOSE):
            return False
    return True


def _lower_bound(comparators: Sequence[Any]) -> Optional[Tuple[str, Any]]:
    """Return the tightest ``(operator, semver)`` lower bound of an AND set."""

    bound: Optional[Tuple[str, Any]] = None
    for comparator in comparators:
        operator = comparator.operator or ""
        if operator not in LOWER_BOUND_OPERATORS:
            continue
        semver = comparator.semver
        if not isinstance(semver, nodesemver.SemVer):
            # "*" matches everything, including 0.0.0.
            semver = "0.0.0"
            operator = ">="
        if bound is None or nodesemver.gt(semver, bound[1], LOOSE):
            bound = (operator, semver)
        elif operator == ">" and not nodesemver.lt(semver, bound[1], LOOSE):
            bound = (operator, semver)
    return bound
