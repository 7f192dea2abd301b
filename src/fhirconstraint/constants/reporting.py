"""Constants for result payloads, atomic writing, and stdout formatting."""

from __future__ import annotations

RESULT_LABEL: str = "Result:"
ERROR_LABEL: str = "Error:"

OUTPUT_FORMAT_RESULTS: str = "results"
OUTPUT_FORMAT_OUTCOME: str = "outcome"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_RESULTS, OUTPUT_FORMAT_OUTCOME})
DEFAULT_OUTPUT_FORMAT: str = OUTPUT_FORMAT_RESULTS

REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

# OperationOutcome issue values.
DEFAULT_ISSUE_SEVERITY: str = "error"
VALID_ISSUE_SEVERITIES: frozenset[str] = frozenset({"fatal", "error", "warning", "information"})
ISSUE_CODE_INVARIANT: str = "invariant"
ISSUE_CODE_EXCEPTION: str = "exception"
ISSUE_CODE_INFORMATIONAL: str = "informational"
SUCCESS_DIAGNOSTICS: str = "Validation successful"
FATAL_ISSUE_SEVERITY: str = "fatal"
INFORMATIONAL_CONSTRAINT_KEYS: frozenset[str] = frozenset({"dom-6"})

OUTCOME_PASS: str = "pass"
OUTCOME_FAIL: str = "fail"
OUTCOME_ABSENT: str = "absent"
OUTCOME_ERROR: str = "error"
