"""Ordered aggregation of constraint outcomes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fhirconstraint.model import ConstraintRequest, ConstraintResult


def build_result(
    request: ConstraintRequest,
    values: Sequence[Any],
    *,
    error: str | None = None,
) -> ConstraintResult:
    """Package the first engine value with the request's provenance fields."""
    has_result = len(values) > 0
    return ConstraintResult(
        key=request.key,
        path=request.parent_path,
        human=request.human,
        source=request.source,
        severity=request.severity,
        result=values[0] if has_result else None,
        has_result=has_result,
        error=error,
    )


class ResultAggregator:
    """Collects results in request order. No filtering or reordering."""

    def __init__(self) -> None:
        self._results: list[ConstraintResult] = []

    def add(
        self,
        request: ConstraintRequest,
        values: Sequence[Any],
        *,
        error: str | None = None,
    ) -> ConstraintResult:
        result = build_result(request, values, error=error)
        self._results.append(result)
        return result

    @property
    def results(self) -> tuple[ConstraintResult, ...]:
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def to_payload(self) -> list[dict[str, Any]]:
        """Return the JSON-compatible list of result dicts."""
        return [result.to_dict() for result in self._results]
