"""FHIRPath engine adapter over ``fhirpathpy``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fhirpathpy import evaluate as fhirpath_evaluate
from fhirpathpy.models import models as fhirpath_models

from fhirconstraint.constants.engines import DEFAULT_FHIR_VERSION, VALID_FHIR_VERSIONS
from fhirconstraint.engine.base import EngineExpression, EvaluationObserver, EvaluationTrace, PathDirective
from fhirconstraint.exceptions import ConfigError, ExpressionEvaluationError

logger = logging.getLogger(__name__)


class FhirpathEngine:
    """Evaluate FHIRPath with one fixed FHIR type model.

    The model is resolved once at construction so every call in a batch sees
    the same type system.
    """

    def __init__(
        self,
        fhir_version: str = DEFAULT_FHIR_VERSION,
        *,
        observer: EvaluationObserver | None = None,
    ) -> None:
        if fhir_version not in VALID_FHIR_VERSIONS:
            raise ConfigError(f"fhir_version must be one of {sorted(VALID_FHIR_VERSIONS)}, got {fhir_version!r}")
        model = fhirpath_models.get(fhir_version)
        if model is None:
            raise ConfigError(f"fhirpathpy has no type model for FHIR {fhir_version}")
        self._fhir_version = fhir_version
        self._model = model
        self._observer = observer

    @property
    def fhir_version(self) -> str:
        return self._fhir_version

    def evaluate(
        self,
        document: Any,
        expression: EngineExpression,
        variables: Mapping[str, Any],
    ) -> list[Any]:
        path: str | dict[str, str]
        if isinstance(expression, PathDirective):
            path = expression.to_dict()
            text = expression.expression
        else:
            path = expression
            text = expression

        try:
            values = fhirpath_evaluate(document, path, dict(variables), self._model)
        except Exception as exc:  # engine raises parser/runtime errors without a shared base
            raise ExpressionEvaluationError(
                f"Failed to evaluate '{text.strip()}': {exc}",
                expression=text,
            ) from exc

        values = list(values) if values is not None else []
        if self._observer is not None:
            self._observer(
                EvaluationTrace(
                    document=document,
                    expression=expression,
                    variables=variables,
                    values=tuple(values),
                )
            )
        return values


def log_trace(trace: EvaluationTrace) -> None:
    """Observer that logs every engine call at DEBUG level."""
    if isinstance(trace.expression, PathDirective):
        shown = f"{trace.expression.base} :: {trace.expression.expression}"
    else:
        shown = trace.expression
    logger.debug(
        "TRACE: %s with %s -> %r",
        shown.strip(),
        ", ".join(sorted(trace.variables)),
        list(trace.values),
    )
