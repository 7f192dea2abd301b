"""Sequential constraint batch evaluator.

Each request is specialized, resolved, evaluated, and aggregated before the
next one starts. Evaluation has no timeout: a non-terminating expression
blocks the whole batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fhirconstraint.constants.engines import ERROR_POLICY_ABORT, ERROR_POLICY_ISOLATE, VALID_ERROR_POLICIES
from fhirconstraint.engine.base import ExpressionEngine
from fhirconstraint.evaluator.aggregate import ResultAggregator
from fhirconstraint.evaluator.context import resolve
from fhirconstraint.evaluator.specializer import specialize
from fhirconstraint.exceptions import ConfigError, ExpressionEvaluationError
from fhirconstraint.evaluator.schema import parse_batch_text
from fhirconstraint.model import ConstraintRequest, ConstraintResult
from fhirconstraint.types import ErrorPolicy

logger = logging.getLogger(__name__)


class ConstraintBatchEvaluator:
    """Evaluate constraint batches against an expression engine.

    With the default ``abort`` policy the first engine failure propagates
    and no results are returned. ``isolate`` records the failure on that
    request's result (outcome absent) and carries on.
    """

    def __init__(self, engine: ExpressionEngine, *, error_policy: ErrorPolicy = ERROR_POLICY_ABORT) -> None:
        if error_policy not in VALID_ERROR_POLICIES:
            raise ConfigError(f"error_policy must be one of {sorted(VALID_ERROR_POLICIES)}, got {error_policy!r}")
        self._engine = engine
        self._error_policy = error_policy

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    def evaluate(self, requests: Iterable[ConstraintRequest]) -> list[ConstraintResult]:
        """Evaluate *requests* in order and return one result per request."""
        aggregator = ResultAggregator()
        for index, request in enumerate(requests):
            self._evaluate_one(index, request, aggregator)
        logger.debug("Evaluated %d constraint(s)", len(aggregator))
        return list(aggregator.results)

    def evaluate_json(self, text: str) -> list[ConstraintResult]:
        """Parse a JSON batch, then evaluate it.

        Raises BatchParseError before any engine call when the batch is
        malformed.
        """
        return self.evaluate(parse_batch_text(text))

    def _evaluate_one(self, index: int, request: ConstraintRequest, aggregator: ResultAggregator) -> None:
        specialized = specialize(request)
        resolved = resolve(request, specialized)
        logger.debug(
            "[%d] %s (%s) parentPath=%r binding=%s",
            index,
            request.key,
            specialized.variant,
            request.parent_path,
            resolved.binding.name,
        )

        try:
            values = self._engine.evaluate(request.data, resolved.expression, resolved.binding.as_variables())
        except ExpressionEvaluationError as exc:
            error = exc.with_key(request.key)
            if self._error_policy != ERROR_POLICY_ISOLATE:
                raise error from exc
            logger.warning("Constraint %s failed to evaluate: %s", request.key, exc)
            aggregator.add(request, [], error=str(exc))
            return

        aggregator.add(request, values)
