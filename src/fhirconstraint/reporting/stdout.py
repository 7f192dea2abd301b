"""Human-readable stdout echo for evaluated batches."""

from __future__ import annotations

from collections.abc import Sequence

from fhirconstraint.constants.reporting import OUTCOME_ABSENT, OUTCOME_ERROR, OUTCOME_FAIL, OUTCOME_PASS, RESULT_LABEL
from fhirconstraint.io import dump_payload
from fhirconstraint.model import ConstraintResult
from fhirconstraint.reporting.filters import count_outcomes, failed_results, outcome_label

ROOT_PATH_LABEL: str = "<root>"


class StdoutReporter:
    """Formats an evaluated batch: per-constraint echo, then the JSON payload."""

    def __init__(self, results: Sequence[ConstraintResult], payload: object) -> None:
        self._results = list(results)
        self._payload = payload

    def render(self) -> str:
        """Render the echo section followed by ``Result: <json>``."""
        sections = [self._render_echo(), self._render_failures(), f"{RESULT_LABEL} {dump_payload(self._payload)}"]
        return "\n".join(section for section in sections if section)

    def _render_echo(self) -> str:
        counts = count_outcomes(self._results)
        lines = [
            f"Evaluated {len(self._results)} constraint(s): "
            f"{counts[OUTCOME_PASS]} pass, {counts[OUTCOME_FAIL]} fail, "
            f"{counts[OUTCOME_ABSENT]} absent, {counts[OUTCOME_ERROR]} error"
        ]
        for result in self._results:
            lines.append(f"  {result.key:<12} {result.path or ROOT_PATH_LABEL:<32} {outcome_label(result)}")
        return "\n".join(lines)

    def _render_failures(self) -> str:
        failed = failed_results(self._results)
        if not failed:
            return ""
        lines = ["Failed constraints:"]
        for result in failed:
            lines.append(f"- Key: {result.key}, Path: {result.path or ROOT_PATH_LABEL}, Human: {result.human}")
        return "\n".join(lines)
