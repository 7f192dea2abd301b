"""Root exception type."""

from __future__ import annotations


class FhirConstraintError(Exception):
    """Base class for all fhirconstraint errors."""
