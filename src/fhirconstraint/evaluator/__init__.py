"""Constraint batch evaluation: specialization, context resolution, aggregation."""

from .aggregate import ResultAggregator, build_result
from .collect import find_root_element, requests_for_element, requests_for_resource
from .context import BindingContext, ResolvedConstraint, resolve, resolve_binding, resolve_expression
from .runtime import ConstraintBatchEvaluator
from .schema import parse_batch, parse_batch_text, parse_request
from .specializer import SpecializedConstraint, classify_expression, specialize

__all__ = [
    "BindingContext",
    "ConstraintBatchEvaluator",
    "ResolvedConstraint",
    "ResultAggregator",
    "SpecializedConstraint",
    "build_result",
    "classify_expression",
    "find_root_element",
    "parse_batch",
    "parse_batch_text",
    "parse_request",
    "requests_for_element",
    "requests_for_resource",
    "resolve",
    "resolve_binding",
    "resolve_expression",
    "specialize",
]
