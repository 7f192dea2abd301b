"""Display-side helpers over result lists. Evaluation itself never filters."""

from __future__ import annotations

from collections.abc import Sequence

from fhirconstraint.constants.reporting import OUTCOME_ABSENT, OUTCOME_ERROR, OUTCOME_FAIL, OUTCOME_PASS
from fhirconstraint.model import ConstraintResult


def outcome_label(result: ConstraintResult) -> str:
    """Return a short label: pass, fail, absent, or error.

    Non-boolean outcomes (e.g. a count) are shown verbatim.
    """
    if result.error is not None:
        return OUTCOME_ERROR
    if not result.has_result:
        return OUTCOME_ABSENT
    if result.passed:
        return OUTCOME_PASS
    if result.failed:
        return OUTCOME_FAIL
    return repr(result.result)


def failed_results(results: Sequence[ConstraintResult]) -> list[ConstraintResult]:
    """Return results whose outcome is exactly ``False``."""
    return [result for result in results if result.failed]


def count_outcomes(results: Sequence[ConstraintResult]) -> dict[str, int]:
    """Count results per outcome bucket; non-boolean outcomes count as pass."""
    counts = {OUTCOME_PASS: 0, OUTCOME_FAIL: 0, OUTCOME_ABSENT: 0, OUTCOME_ERROR: 0}
    for result in results:
        if result.error is not None:
            counts[OUTCOME_ERROR] += 1
        elif not result.has_result:
            counts[OUTCOME_ABSENT] += 1
        elif result.failed:
            counts[OUTCOME_FAIL] += 1
        else:
            counts[OUTCOME_PASS] += 1
    return counts
