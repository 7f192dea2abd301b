"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "fhirconstraint.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "fhir_version",
        "error_policy",
        "exit_on_error",
        "output_format",
    }
)
