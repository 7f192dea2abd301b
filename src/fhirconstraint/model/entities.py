"""Constraint request/result entities exchanged with the batch evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fhirconstraint.constants.constraints import RESOURCE_TYPE_FIELD
from fhirconstraint.types import JsonObject


@dataclass(frozen=True)
class ConstraintRequest:
    """One invariant to evaluate against a resource fragment."""

    data: JsonObject
    root_data: JsonObject
    expression: str
    key: str
    parent_path: str = ""
    human: str = ""
    source: str | None = None
    severity: str | None = None

    @property
    def is_root(self) -> bool:
        """Whether the fragment is addressed as the top-level resource."""
        return self.parent_path == ""

    @property
    def has_resource_type(self) -> bool:
        """Whether the fragment carries its own ``resourceType`` discriminator."""
        value = self.data.get(RESOURCE_TYPE_FIELD)
        return isinstance(value, str) and bool(value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the batch wire keys."""
        payload: dict[str, Any] = {
            "data": self.data,
            "rootData": self.root_data,
            "constraintExpression": self.expression,
            "constraintKey": self.key,
            "parentPath": self.parent_path,
            "constraintHuman": self.human,
        }
        if self.source is not None:
            payload["constraintSource"] = self.source
        if self.severity is not None:
            payload["constraintSeverity"] = self.severity
        return payload


@dataclass(frozen=True)
class ConstraintResult:
    """Outcome of one constraint plus the provenance copied from its request.

    ``has_result`` separates an absent outcome (engine returned nothing) from
    an outcome whose value happens to be ``None``-like or ``False``.
    """

    key: str
    path: str
    human: str
    source: str | None = None
    severity: str | None = None
    result: Any = None
    has_result: bool = False
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.has_result and self.result is True

    @property
    def failed(self) -> bool:
        return self.has_result and self.result is False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict; absent fields are omitted."""
        payload: dict[str, Any] = {}
        if self.has_result:
            payload["result"] = self.result
        payload["key"] = self.key
        payload["path"] = self.path
        payload["human"] = self.human
        if self.source is not None:
            payload["source"] = self.source
        if self.severity is not None:
            payload["severity"] = self.severity
        if self.error is not None:
            payload["error"] = self.error
        return payload
