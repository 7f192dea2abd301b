"""CLI entrypoint for the constraint batch evaluator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fhirconstraint import __version__
from fhirconstraint.config import apply_overrides, load_config
from fhirconstraint.constants.engines import VALID_ERROR_POLICIES, VALID_FHIR_VERSIONS
from fhirconstraint.constants.reporting import (
    ERROR_LABEL,
    OUTPUT_FORMAT_OUTCOME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    VALID_OUTPUT_FORMATS,
)
from fhirconstraint.engine import FhirpathEngine, log_trace
from fhirconstraint.evaluator import ConstraintBatchEvaluator
from fhirconstraint.exceptions import ConfigError, FhirConstraintError
from fhirconstraint.io import load_json_file, write_json_atomic
from fhirconstraint.model import ConstraintResult
from fhirconstraint.reporting import StdoutReporter, build_failure_outcome, build_operation_outcome

CLI_DESCRIPTION: str = "Evaluate a batch of FHIRPath invariant constraints against FHIR resources."


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="fhirconstraint", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("batch", nargs="?", default=None, help="JSON array of constraint requests")
    source.add_argument("-b", "--batch-file", type=Path, default=None, help="Read the JSON batch from a file")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument(
        "--fhir-version",
        choices=sorted(VALID_FHIR_VERSIONS),
        default=None,
        help="FHIR type model used by the expression engine (default: r4)",
    )
    parser.add_argument(
        "--error-policy",
        choices=sorted(VALID_ERROR_POLICIES),
        default=None,
        help="abort (default): first expression error fails the batch; isolate: record it per constraint",
    )
    parser.add_argument(
        "--no-exit-on-error",
        action="store_true",
        help="Report errors on stderr but exit with status 0",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="results (default): annotated result array; outcome: FHIR OperationOutcome",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Also write the payload to this file")
    parser.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    parser.add_argument("--trace", action="store_true", help="Log every engine call (implies --verbose)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.batch is None and args.batch_file is None:
        parser.error("a JSON batch argument or --batch-file is required")

    level = logging.DEBUG if args.verbose or args.trace else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    try:
        config = apply_overrides(
            load_config(config_path=args.config),
            fhir_version=args.fhir_version,
            error_policy=args.error_policy,
            output_format=args.output_format,
            exit_on_error=False if args.no_exit_on_error else None,
        )
        engine = FhirpathEngine(config.fhir_version, observer=log_trace if args.trace else None)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    evaluator = ConstraintBatchEvaluator(engine, error_policy=config.error_policy)
    try:
        text = args.batch if args.batch is not None else load_json_file(args.batch_file)
        results = evaluator.evaluate_json(text)
    except FhirConstraintError as exc:
        print(f"{ERROR_LABEL} {exc}", file=sys.stderr)
        if config.output_format == OUTPUT_FORMAT_OUTCOME:
            _emit(args, results=[], payload=build_failure_outcome(str(exc)))
        return 1 if config.exit_on_error else 0

    if config.output_format == OUTPUT_FORMAT_OUTCOME:
        payload: object = build_operation_outcome(results)
    else:
        payload = [result.to_dict() for result in results]

    if not _emit(args, results=results, payload=payload):
        return 1 if config.exit_on_error else 0
    return 0


def _emit(args: argparse.Namespace, *, results: list[ConstraintResult], payload: object) -> bool:
    """Write the payload file and print the stdout report; False if the write failed."""
    if args.output is not None:
        try:
            write_json_atomic(
                path=args.output,
                payload=payload,
                temp_prefix=REPORT_TEMP_PREFIX,
                temp_suffix=REPORT_TEMP_SUFFIX,
            )
        except OSError as exc:
            print(f"{ERROR_LABEL} Failed to write {args.output}: {exc}", file=sys.stderr)
            return False

    if not args.no_stdout:
        print(StdoutReporter(results, payload).render())
    return True


if __name__ == "__main__":
    raise SystemExit(main())
