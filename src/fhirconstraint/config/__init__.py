"""Configuration loading and normalization for constraint evaluation."""

from __future__ import annotations

from fhirconstraint.config.loader import apply_overrides, load_config
from fhirconstraint.config.model import ValidatorConfig

__all__ = [
    "ValidatorConfig",
    "apply_overrides",
    "load_config",
]
