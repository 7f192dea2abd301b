"""Tests for the sequential batch evaluator."""

from __future__ import annotations

import json

import pytest

from fhirconstraint.constants.constraints import CONTAINED_REFERENCE_TEMPLATE
from fhirconstraint.engine import PathDirective
from fhirconstraint.evaluator import ConstraintBatchEvaluator
from fhirconstraint.exceptions import BatchParseError, ConfigError, ExpressionEvaluationError

from .conftest import PATIENT, RecordingEngine, make_request, wire_entry


def test_scenario_root_patient_identifier(engine: RecordingEngine) -> None:
    results = ConstraintBatchEvaluator(engine).evaluate([make_request()])

    assert len(engine.calls) == 1
    call = engine.calls[0]
    assert call.document == PATIENT
    assert call.expression == "identifier.exists()"
    assert call.variables == {"rootResource": PATIENT}
    assert len(results) == 1
    assert results[0].result is True
    assert results[0].has_result


def test_scenario_embedded_narrative_count() -> None:
    engine = RecordingEngine(responder=lambda call: [2])
    narrative = {"div": "<div>x</div>", "status": "generated"}
    request = make_request(data=narrative, parent_path="Patient.text", expression="children().count()")

    results = ConstraintBatchEvaluator(engine).evaluate([request])

    assert engine.calls[0].expression == PathDirective(base="Patient.text", expression="children().count()")
    assert engine.calls[0].document == narrative
    assert results[0].result == 2
    assert results[0].path == "Patient.text"


def test_scenario_contained_reference_template(engine: RecordingEngine) -> None:
    request = make_request(expression="contained.where((('#'+id in %resource.descendants().reference)).not()).empty()")

    ConstraintBatchEvaluator(engine).evaluate([request])

    assert engine.calls[0].expression == CONTAINED_REFERENCE_TEMPLATE
    assert set(engine.calls[0].variables) == {"resource"}


def test_results_preserve_order_and_length() -> None:
    engine = RecordingEngine(responder=lambda call: [call.expression == "b"])
    requests = [make_request(key=key, expression=key) for key in ("a", "b", "c", "b")]

    results = ConstraintBatchEvaluator(engine).evaluate(requests)

    assert [r.key for r in results] == ["a", "b", "c", "b"]
    assert [r.result for r in results] == [False, True, False, True]


def test_empty_engine_output_is_absent_not_false() -> None:
    engine = RecordingEngine(responder=lambda call: [])

    results = ConstraintBatchEvaluator(engine).evaluate([make_request()])

    assert results[0].has_result is False
    assert results[0].result is None
    assert not results[0].failed
    assert "result" not in results[0].to_dict()


def test_only_first_value_is_captured() -> None:
    engine = RecordingEngine(responder=lambda call: [False, True, True])

    results = ConstraintBatchEvaluator(engine).evaluate([make_request()])

    assert results[0].result is False


def test_provenance_fields_are_copied() -> None:
    engine = RecordingEngine()
    request = make_request(key="k", human="h", source="s", severity="warning", parent_path="Patient.text")

    result = ConstraintBatchEvaluator(engine).evaluate([request])[0]

    assert (result.key, result.human, result.source, result.severity, result.path) == (
        "k",
        "h",
        "s",
        "warning",
        "Patient.text",
    )


def test_expression_error_aborts_batch_by_default() -> None:
    engine = RecordingEngine(failing=frozenset({"bad("}))
    requests = [make_request(key="ok-1"), make_request(key="bad-1", expression="bad("), make_request(key="ok-2")]

    with pytest.raises(ExpressionEvaluationError) as excinfo:
        ConstraintBatchEvaluator(engine).evaluate(requests)

    assert excinfo.value.key == "bad-1"
    assert len(engine.calls) == 2


def test_isolate_policy_records_error_and_continues() -> None:
    engine = RecordingEngine(failing=frozenset({"bad("}))
    requests = [make_request(key="ok-1"), make_request(key="bad-1", expression="bad("), make_request(key="ok-2")]

    results = ConstraintBatchEvaluator(engine, error_policy="isolate").evaluate(requests)

    assert [r.key for r in results] == ["ok-1", "bad-1", "ok-2"]
    assert results[1].has_result is False
    assert results[1].error is not None
    assert "bad(" in results[1].error
    assert results[2].result is True


def test_unknown_error_policy_is_rejected(engine: RecordingEngine) -> None:
    with pytest.raises(ConfigError, match="error_policy"):
        ConstraintBatchEvaluator(engine, error_policy="retry")  # type: ignore[arg-type]


def test_evaluate_json_accepts_wire_format(engine: RecordingEngine) -> None:
    text = json.dumps([wire_entry(), wire_entry(constraintKey="pat-2", parentPath="Patient.text")])

    results = ConstraintBatchEvaluator(engine).evaluate_json(text)

    assert [r.key for r in results] == ["pat-1", "pat-2"]
    assert isinstance(engine.calls[1].expression, PathDirective)


def test_malformed_json_fails_before_any_evaluation(engine: RecordingEngine) -> None:
    with pytest.raises(BatchParseError, match="not valid JSON"):
        ConstraintBatchEvaluator(engine).evaluate_json('[{"data": {}')

    assert engine.calls == []


def test_malformed_entry_fails_before_any_evaluation(engine: RecordingEngine) -> None:
    text = json.dumps([wire_entry(), {"data": PATIENT}])

    with pytest.raises(BatchParseError, match=r"batch\[1\]"):
        ConstraintBatchEvaluator(engine).evaluate_json(text)

    assert engine.calls == []


def test_empty_batch_yields_empty_results(engine: RecordingEngine) -> None:
    assert ConstraintBatchEvaluator(engine).evaluate_json("[]") == []
