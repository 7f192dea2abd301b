"""Shared type aliases for fhirconstraint."""

from .common import (
    BindingName,
    ConstraintVariant,
    ErrorPolicy,
    JsonObject,
    JsonScalar,
    JsonValue,
    OutputFormat,
)

__all__ = [
    "BindingName",
    "ConstraintVariant",
    "ErrorPolicy",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
