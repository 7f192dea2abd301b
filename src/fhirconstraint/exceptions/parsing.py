"""Parsing-related exceptions."""

from __future__ import annotations

from fhirconstraint.exceptions.base import FhirConstraintError


class BatchParseError(FhirConstraintError, ValueError):
    """Raised when a constraint batch is not well-formed JSON or has a malformed entry."""
