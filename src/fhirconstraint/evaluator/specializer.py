"""Classification and rewriting of contained-reference constraints."""

from __future__ import annotations

from dataclasses import dataclass

from fhirconstraint.constants.constraints import CONTAINED_REFERENCE_PREFIX, CONTAINED_REFERENCE_TEMPLATE
from fhirconstraint.model import ConstraintRequest
from fhirconstraint.types import ConstraintVariant

STANDARD: ConstraintVariant = "standard"
CONTAINED_REFERENCE_CHECK: ConstraintVariant = "contained_reference_check"


@dataclass(frozen=True)
class SpecializedConstraint:
    """Expression text to dispatch, tagged with the variant it was derived from."""

    variant: ConstraintVariant
    expression: str

    @property
    def is_contained_reference_check(self) -> bool:
        return self.variant == CONTAINED_REFERENCE_CHECK


def classify_expression(expression: str) -> ConstraintVariant:
    """Classify a constraint by a prefix check on its original text."""
    if expression.startswith(CONTAINED_REFERENCE_PREFIX):
        return CONTAINED_REFERENCE_CHECK
    return STANDARD


def specialize(request: ConstraintRequest) -> SpecializedConstraint:
    """Return the expression to dispatch for *request*.

    Contained-reference rules are replaced wholesale by the canonical
    template; whatever followed the prefix is ignored. The request itself is
    left untouched.
    """
    variant = classify_expression(request.expression)
    if variant == CONTAINED_REFERENCE_CHECK:
        return SpecializedConstraint(variant=variant, expression=CONTAINED_REFERENCE_TEMPLATE)
    return SpecializedConstraint(variant=variant, expression=request.expression)
