"""Strict shape validation for constraint batch entries.

Raises BatchParseError on the first malformed entry, before anything is
evaluated.
"""

from __future__ import annotations

import json
from typing import Any

from fhirconstraint.exceptions import BatchParseError
from fhirconstraint.model import ConstraintRequest

# Wire key first, accepted alias second.
_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "expression": ("constraintExpression", "expression"),
    "key": ("constraintKey", "key"),
    "human": ("constraintHuman", "human"),
    "source": ("constraintSource", "source"),
    "severity": ("constraintSeverity", "severity"),
}


def parse_batch(raw: Any) -> list[ConstraintRequest]:
    """Validate a decoded batch and build requests in input order."""
    if not isinstance(raw, list):
        raise BatchParseError(f"constraint batch must be a JSON array, got {_json_type(raw)}")
    return [parse_request(entry, index) for index, entry in enumerate(raw)]


def parse_request(entry: Any, index: int) -> ConstraintRequest:
    """Validate one batch entry and build a ConstraintRequest."""
    where = f"batch[{index}]"
    if not isinstance(entry, dict):
        raise BatchParseError(f"{where}: entry must be an object, got {_json_type(entry)}")

    data = entry.get("data")
    if not isinstance(data, dict):
        raise BatchParseError(f"{where}: 'data' must be an object")

    root_data = entry.get("rootData", data)
    if root_data is None:
        root_data = data
    if not isinstance(root_data, dict):
        raise BatchParseError(f"{where}: 'rootData' must be an object")

    expression = _lookup(entry, "expression")
    if not isinstance(expression, str) or not expression.strip():
        raise BatchParseError(f"{where}: 'constraintExpression' must be a non-empty string")

    key = _lookup(entry, "key")
    if not isinstance(key, str):
        raise BatchParseError(f"{where}: 'constraintKey' must be a string")

    parent_path = entry.get("parentPath", "")
    if parent_path is None:
        parent_path = ""
    if not isinstance(parent_path, str):
        raise BatchParseError(f"{where}: 'parentPath' must be a string")

    human = _lookup(entry, "human")
    if human is None:
        human = ""
    if not isinstance(human, str):
        raise BatchParseError(f"{where}: 'constraintHuman' must be a string")

    return ConstraintRequest(
        data=data,
        root_data=root_data,
        expression=expression,
        key=key,
        parent_path=parent_path,
        human=human,
        source=_optional_string(entry, "source", where),
        severity=_optional_string(entry, "severity", where),
    )


def _lookup(entry: dict[str, Any], field: str) -> Any:
    for name in _FIELD_KEYS[field]:
        if name in entry:
            return entry[name]
    return None


def _optional_string(entry: dict[str, Any], field: str, where: str) -> str | None:
    value = _lookup(entry, field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise BatchParseError(f"{where}: '{_FIELD_KEYS[field][0]}' must be a string")
    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def parse_batch_text(text: str) -> list[ConstraintRequest]:
    """Decode a JSON batch string and validate every entry."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BatchParseError(f"constraint batch is not valid JSON: {exc}") from exc
    return parse_batch(raw)
