"""Shared helpers for reporting test modules."""

from __future__ import annotations

from typing import Any

from fhirconstraint.model import ConstraintResult


def _result(**overrides: Any) -> ConstraintResult:
    """Return a passing root-level result, merged with *overrides*."""
    base: dict[str, Any] = {
        "key": "pat-1",
        "path": "",
        "human": "Patient has an identifier",
        "result": True,
        "has_result": True,
    }
    base.update(overrides)
    return ConstraintResult(**base)
