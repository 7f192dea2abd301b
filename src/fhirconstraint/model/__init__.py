"""Core data models for fhirconstraint."""

from .entities import ConstraintRequest, ConstraintResult

__all__ = [
    "ConstraintRequest",
    "ConstraintResult",
]
