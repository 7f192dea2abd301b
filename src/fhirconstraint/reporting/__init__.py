"""Result reporting: stdout echo, filters, and OperationOutcome output."""

from .filters import count_outcomes, failed_results, outcome_label
from .outcome import build_failure_outcome, build_operation_outcome
from .stdout import StdoutReporter

__all__ = [
    "StdoutReporter",
    "build_failure_outcome",
    "build_operation_outcome",
    "count_outcomes",
    "failed_results",
    "outcome_label",
]
