"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

BindingName: TypeAlias = Literal["resource", "rootResource"]
ConstraintVariant: TypeAlias = Literal["standard", "contained_reference_check"]
ErrorPolicy: TypeAlias = Literal["abort", "isolate"]
OutputFormat: TypeAlias = Literal["results", "outcome"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
