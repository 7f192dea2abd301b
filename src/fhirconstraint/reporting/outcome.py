"""Map constraint results to a FHIR OperationOutcome resource."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fhirconstraint.constants.reporting import (
    DEFAULT_ISSUE_SEVERITY,
    FATAL_ISSUE_SEVERITY,
    INFORMATIONAL_CONSTRAINT_KEYS,
    ISSUE_CODE_EXCEPTION,
    ISSUE_CODE_INFORMATIONAL,
    ISSUE_CODE_INVARIANT,
    SUCCESS_DIAGNOSTICS,
    VALID_ISSUE_SEVERITIES,
)
from fhirconstraint.model import ConstraintResult

ISSUE_SOURCE_EXTENSION_URL: str = "http://hl7.org/fhir/StructureDefinition/operationoutcome-issue-source"


def build_operation_outcome(results: Sequence[ConstraintResult]) -> dict[str, Any]:
    """Build an OperationOutcome with one issue per failed or errored constraint.

    Best-practice constraints (``dom-6``) are reported with the
    ``informational`` code rather than ``invariant``. An outcome with no
    issues gets a single informational issue, since OperationOutcome
    requires at least one.
    """
    issues: list[dict[str, Any]] = []
    for result in results:
        if result.error is not None:
            issues.append(_issue(result, severity="error", code=ISSUE_CODE_EXCEPTION, diagnostics=result.error))
        elif result.failed:
            code = ISSUE_CODE_INFORMATIONAL if result.key in INFORMATIONAL_CONSTRAINT_KEYS else ISSUE_CODE_INVARIANT
            issues.append(
                _issue(
                    result,
                    severity=_issue_severity(result.severity),
                    code=code,
                    diagnostics=result.human or f"Constraint {result.key} failed",
                )
            )

    if not issues:
        issues.append(
            {
                "severity": "information",
                "code": ISSUE_CODE_INFORMATIONAL,
                "diagnostics": SUCCESS_DIAGNOSTICS,
            }
        )

    return {"resourceType": "OperationOutcome", "issue": issues}


def build_failure_outcome(message: str) -> dict[str, Any]:
    """Build an OperationOutcome for a batch that could not be evaluated."""
    return {
        "resourceType": "OperationOutcome",
        "issue": [
            {
                "severity": FATAL_ISSUE_SEVERITY,
                "code": ISSUE_CODE_EXCEPTION,
                "diagnostics": f"Error validating constraints: {message}",
            }
        ],
    }


def _issue(result: ConstraintResult, *, severity: str, code: str, diagnostics: str) -> dict[str, Any]:
    details = f"{result.key}: {result.human}" if result.human else result.key
    issue: dict[str, Any] = {
        "severity": severity,
        "code": code,
        "details": {"text": details},
        "diagnostics": diagnostics,
    }
    if result.path:
        issue["expression"] = [result.path]
    if result.source:
        issue["extension"] = [{"url": ISSUE_SOURCE_EXTENSION_URL, "valueString": result.source}]
    return issue


def _issue_severity(severity: str | None) -> str:
    if severity is None:
        return DEFAULT_ISSUE_SEVERITY
    normalized = severity.strip().lower()
    return normalized if normalized in VALID_ISSUE_SEVERITIES else DEFAULT_ISSUE_SEVERITY
