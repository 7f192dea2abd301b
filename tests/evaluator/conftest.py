"""Shared fixtures and helpers for evaluator test modules."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from fhirconstraint.engine.base import EngineExpression
from fhirconstraint.exceptions import ExpressionEvaluationError
from fhirconstraint.model import ConstraintRequest

PATIENT: dict[str, Any] = {
    "resourceType": "Patient",
    "id": "p1",
    "identifier": [{"system": "urn:oid:1.2.3", "value": "12345"}],
    "text": {"status": "generated", "div": "<div xmlns=\"http://www.w3.org/1999/xhtml\">Jane</div>"},
}


@dataclass
class EngineCall:
    document: Any
    expression: EngineExpression
    variables: dict[str, Any]


@dataclass
class RecordingEngine:
    """Fake expression engine that records calls and returns canned values.

    ``responder`` maps a call to its return list; by default every call
    yields ``[True]``. Expressions listed in ``failing`` raise.
    """

    responder: Callable[[EngineCall], list[Any]] = lambda call: [True]
    failing: frozenset[str] = frozenset()
    calls: list[EngineCall] = field(default_factory=list)

    def evaluate(
        self,
        document: Any,
        expression: EngineExpression,
        variables: Mapping[str, Any],
    ) -> list[Any]:
        call = EngineCall(document=document, expression=expression, variables=dict(variables))
        self.calls.append(call)
        text = expression if isinstance(expression, str) else expression.expression
        if text in self.failing:
            raise ExpressionEvaluationError(f"Failed to evaluate '{text}': boom", expression=text)
        return self.responder(call)


def make_request(**overrides: Any) -> ConstraintRequest:
    """Return a root-level Patient request, merged with *overrides*."""
    base: dict[str, Any] = {
        "data": PATIENT,
        "root_data": PATIENT,
        "expression": "identifier.exists()",
        "key": "pat-1",
        "parent_path": "",
        "human": "Patient has an identifier",
        "source": "http://hl7.org/fhir/StructureDefinition/Patient",
        "severity": "error",
    }
    base.update(overrides)
    return ConstraintRequest(**base)


def wire_entry(**overrides: Any) -> dict[str, Any]:
    """Return a batch entry using the wire keys, merged with *overrides*."""
    base: dict[str, Any] = {
        "data": PATIENT,
        "rootData": PATIENT,
        "constraintExpression": "identifier.exists()",
        "constraintKey": "pat-1",
        "parentPath": "",
        "constraintHuman": "Patient has an identifier",
        "constraintSource": "http://hl7.org/fhir/StructureDefinition/Patient",
        "constraintSeverity": "error",
    }
    base.update(overrides)
    return base


@pytest.fixture()
def engine() -> RecordingEngine:
    return RecordingEngine()
