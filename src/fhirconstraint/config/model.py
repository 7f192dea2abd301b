"""Config data model for constraint evaluation."""

from __future__ import annotations

from dataclasses import dataclass

from fhirconstraint.constants.engines import DEFAULT_FHIR_VERSION, ERROR_POLICY_ABORT
from fhirconstraint.constants.reporting import DEFAULT_OUTPUT_FORMAT
from fhirconstraint.types import ErrorPolicy, OutputFormat


@dataclass(frozen=True)
class ValidatorConfig:
    """Resolved validator config."""

    fhir_version: str = DEFAULT_FHIR_VERSION
    error_policy: ErrorPolicy = ERROR_POLICY_ABORT
    exit_on_error: bool = True
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
