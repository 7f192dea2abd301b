"""Expression evaluation exceptions."""

from __future__ import annotations

from fhirconstraint.exceptions.base import FhirConstraintError


class ExpressionEvaluationError(FhirConstraintError):
    """Raised when the expression engine rejects or fails to evaluate an expression."""

    def __init__(self, message: str, *, expression: str = "", key: str = "") -> None:
        super().__init__(message)
        self.expression = expression
        self.key = key

    def with_key(self, key: str) -> ExpressionEvaluationError:
        """Return a copy of this error attributed to constraint *key*."""
        return ExpressionEvaluationError(str(self), expression=self.expression, key=key)
