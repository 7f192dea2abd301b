"""Constants for constraint classification and binding contexts."""

from __future__ import annotations

CONTAINED_REFERENCE_PREFIX: str = "contained.where("

# Matched when '#'+id is referenced anywhere in the root resource, or when the
# contained element itself points back at the container with '#'.
CONTAINED_REFERENCE_TEMPLATE: str = (
    "contained.where((('#'+id in (%resource.descendants().reference"
    " | %resource.descendants().ofType(canonical)"
    " | %resource.descendants().ofType(uri)"
    " | %resource.descendants().ofType(url)))"
    " or descendants().where(reference = '#').exists()"
    " or descendants().where(ofType(canonical) = '#').exists()).not()).empty()"
)

RESOURCE_VARIABLE: str = "resource"
ROOT_RESOURCE_VARIABLE: str = "rootResource"

RESOURCE_TYPE_FIELD: str = "resourceType"
