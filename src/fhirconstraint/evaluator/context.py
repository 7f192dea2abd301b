"""Binding-context and expression-form resolution per constraint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fhirconstraint.constants.constraints import RESOURCE_VARIABLE, ROOT_RESOURCE_VARIABLE
from fhirconstraint.engine.base import EngineExpression, PathDirective
from fhirconstraint.evaluator.specializer import SpecializedConstraint
from fhirconstraint.model import ConstraintRequest
from fhirconstraint.types import BindingName, JsonObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BindingContext:
    """The single variable exposing the root resource to an expression.

    Build with :meth:`by_resource` or :meth:`by_root_resource`.
    """

    name: BindingName
    value: JsonObject

    @classmethod
    def by_resource(cls, root: JsonObject) -> BindingContext:
        """Bind the root as ``%resource``."""
        return cls(name=RESOURCE_VARIABLE, value=root)

    @classmethod
    def by_root_resource(cls, root: JsonObject) -> BindingContext:
        """Bind the root as ``%rootResource``."""
        return cls(name=ROOT_RESOURCE_VARIABLE, value=root)

    def as_variables(self) -> dict[str, Any]:
        return {self.name: self.value}


@dataclass(frozen=True)
class ResolvedConstraint:
    """Everything the engine needs for one request besides the document."""

    expression: EngineExpression
    binding: BindingContext


def resolve_binding(request: ConstraintRequest, specialized: SpecializedConstraint) -> BindingContext:
    """Pick the binding: the contained-reference template reads ``%resource``."""
    if specialized.is_contained_reference_check:
        return BindingContext.by_resource(request.root_data)
    return BindingContext.by_root_resource(request.root_data)


def resolve_expression(request: ConstraintRequest, expression: str) -> EngineExpression:
    """Return bare text for root fragments, a base-path directive otherwise.

    A non-empty parent path always yields a directive, even when the fragment
    carries its own ``resourceType`` (e.g. a contained resource addressed
    from its container).
    """
    if request.is_root:
        if not request.has_resource_type:
            logger.warning(
                "Constraint %s targets a root fragment without resourceType; evaluating as bare expression",
                request.key,
            )
        return expression
    return PathDirective(base=request.parent_path, expression=expression)


def resolve(request: ConstraintRequest, specialized: SpecializedConstraint) -> ResolvedConstraint:
    """Resolve expression form and binding context for *request*."""
    return ResolvedConstraint(
        expression=resolve_expression(request, specialized.expression),
        binding=resolve_binding(request, specialized),
    )
