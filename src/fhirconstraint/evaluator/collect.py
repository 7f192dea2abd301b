"""Build constraint requests from StructureDefinition element constraints."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from fhirconstraint.model import ConstraintRequest
from fhirconstraint.types import JsonObject

logger = logging.getLogger(__name__)


def find_root_element(structure_definition: dict[str, Any]) -> dict[str, Any] | None:
    """Return the snapshot element whose id equals the definition id."""
    snapshot = structure_definition.get("snapshot") or {}
    target = structure_definition.get("id")
    for element in snapshot.get("element", []):
        if element.get("id") == target:
            return element
    return None


def requests_for_element(
    *,
    root_data: JsonObject,
    data: JsonObject,
    element: dict[str, Any],
    parent_path: str = "",
    exclude_keys: Iterable[str] = (),
) -> list[ConstraintRequest]:
    """Return one request per constraint declared on *element*.

    Constraints without an expression are skipped; so are keys listed in
    *exclude_keys* and repeated keys.
    """
    excluded = frozenset(exclude_keys)
    seen: set[str] = set()
    requests: list[ConstraintRequest] = []
    for constraint in element.get("constraint") or []:
        key = constraint.get("key", "")
        expression = constraint.get("expression")
        if key in excluded:
            continue
        if not expression:
            logger.debug("Skipping constraint %s on %s: no expression", key, element.get("id"))
            continue
        if key in seen:
            logger.debug("Skipping duplicate constraint %s at %s", key, parent_path or "<root>")
            continue
        seen.add(key)
        requests.append(
            ConstraintRequest(
                data=data,
                root_data=root_data,
                expression=expression,
                key=key,
                parent_path=parent_path,
                human=constraint.get("human", ""),
                source=constraint.get("source"),
                severity=constraint.get("severity"),
            )
        )
    return requests


def requests_for_resource(
    resource: JsonObject,
    structure_definition: dict[str, Any],
    *,
    exclude_keys: Iterable[str] = (),
) -> list[ConstraintRequest]:
    """Requests for the resource-level constraints of *structure_definition*."""
    element = find_root_element(structure_definition)
    if element is None:
        logger.warning("No root element found in StructureDefinition %s", structure_definition.get("id"))
        return []
    return requests_for_element(
        root_data=resource,
        data=resource,
        element=element,
        exclude_keys=exclude_keys,
    )
