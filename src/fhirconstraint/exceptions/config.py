"""Configuration-related exceptions."""

from __future__ import annotations

from fhirconstraint.exceptions.base import FhirConstraintError


class ConfigError(FhirConstraintError, ValueError):
    """Raised when validator configuration is invalid."""
