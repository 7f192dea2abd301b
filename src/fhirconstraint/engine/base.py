"""Contract between the batch evaluator and an expression engine."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias


@dataclass(frozen=True)
class PathDirective:
    """Expression evaluated relative to an explicit base path.

    Embedded fragments have no ``resourceType``; the base path tells the
    engine which element definition (and so which choice types) applies.
    """

    base: str
    expression: str

    def to_dict(self) -> dict[str, str]:
        return {"base": self.base, "expression": self.expression}


EngineExpression: TypeAlias = str | PathDirective


@dataclass(frozen=True)
class EvaluationTrace:
    """Record of a single engine call, handed to observers."""

    document: Any
    expression: EngineExpression
    variables: Mapping[str, Any]
    values: tuple[Any, ...]


EvaluationObserver: TypeAlias = Callable[[EvaluationTrace], None]


class ExpressionEngine(Protocol):
    """Evaluates an expression against a JSON document tree."""

    def evaluate(
        self,
        document: Any,
        expression: EngineExpression,
        variables: Mapping[str, Any],
    ) -> list[Any]:
        """Return the ordered result values; raise ExpressionEvaluationError on failure."""
        ...
