"""Shared helpers for CLI test modules."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

from fhirconstraint.exceptions import ExpressionEvaluationError

PATIENT: dict[str, Any] = {"resourceType": "Patient", "id": "p1", "identifier": [{"value": "12345"}]}


def _wire_entry(**overrides: Any) -> dict[str, Any]:
    """Return a batch entry using the wire keys, merged with *overrides*."""
    base: dict[str, Any] = {
        "data": PATIENT,
        "rootData": PATIENT,
        "constraintExpression": "identifier.exists()",
        "constraintKey": "pat-1",
        "parentPath": "",
        "constraintHuman": "Patient has an identifier",
    }
    base.update(overrides)
    return base


def _stub_engine(values: list[Any] | None = None, failing: frozenset[str] = frozenset()) -> MagicMock:
    """Return a mock engine yielding *values*; expressions in *failing* raise."""

    def evaluate(document: Any, expression: Any, variables: Any) -> list[Any]:
        text = expression if isinstance(expression, str) else expression.expression
        if text in failing:
            raise ExpressionEvaluationError(f"Failed to evaluate '{text}': boom", expression=text)
        return list(values) if values is not None else [True]

    engine = MagicMock()
    engine.evaluate.side_effect = evaluate
    return engine
