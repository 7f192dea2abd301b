"""Shared exception hierarchy for fhirconstraint."""

from __future__ import annotations

from .base import FhirConstraintError
from .config import ConfigError
from .evaluation import ExpressionEvaluationError
from .parsing import BatchParseError

__all__ = [
    "BatchParseError",
    "ConfigError",
    "ExpressionEvaluationError",
    "FhirConstraintError",
]
