"""Expression engine defaults."""

from __future__ import annotations

DEFAULT_FHIR_VERSION: str = "r4"
VALID_FHIR_VERSIONS: frozenset[str] = frozenset({"dstu2", "stu3", "r4", "r5"})

ERROR_POLICY_ABORT: str = "abort"
ERROR_POLICY_ISOLATE: str = "isolate"
VALID_ERROR_POLICIES: frozenset[str] = frozenset({ERROR_POLICY_ABORT, ERROR_POLICY_ISOLATE})
