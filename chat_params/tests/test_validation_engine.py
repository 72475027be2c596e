"""Tests for the whole-request validation engine.

Covers required fields, inclusive/exclusive range boundaries, shape checks,
alternate-pair conflicts surfacing as violations, and the fail-complete
versus fail-fast policies.
"""

from __future__ import annotations

import math

import pytest

from chat_params import (
    FunctionDefinition,
    InvalidEnumValue,
    InvalidFieldType,
    Message,
    MissingRequiredField,
    MutualExclusionConflict,
    RangeViolation,
    RequestConfiguration,
    RequestValidationError,
    ResponseFormat,
    ResponseFormatKind,
    ValidationPolicy,
    ensure_valid,
    validate,
)
from chat_params.base.errors import ErrorCode
from chat_params.base import HasModel, HasTemperature, HasUser, SupportsValidation


def test_valid_configuration_reports_ok(full_config):
    report = validate(full_config)
    assert report.ok  # nosec B101 - test assertion
    assert report.violations == ()  # nosec B101 - test assertion
    assert report.resolved is not None  # nosec B101 - test assertion


def test_temperature_above_range_is_rejected(minimal_config):
    minimal_config.temperature = 2.5
    report = validate(minimal_config)
    assert len(report.violations) == 1  # nosec B101 - test assertion
    err = report.violations[0]
    assert isinstance(err, RangeViolation)  # nosec B101 - test assertion
    assert err.field == "temperature"  # nosec B101 - test assertion
    assert err.value == 2.5  # nosec B101 - test assertion
    assert err.allowed_range == (0, 2)  # nosec B101 - test assertion
    assert err.interval == "[0, 2]"  # nosec B101 - test assertion


@pytest.mark.parametrize("value", [0.0, 2.0, 1])
def test_temperature_boundaries_are_inclusive(minimal_config, value):
    minimal_config.temperature = value
    assert validate(minimal_config).ok  # nosec B101 - test assertion


def test_top_p_zero_is_excluded(minimal_config):
    minimal_config.top_p = 0.0
    report = validate(minimal_config)
    assert report.fields == ["top_p"]  # nosec B101 - test assertion
    assert report.violations[0].interval == "(0, 1]"  # nosec B101 - test assertion
    minimal_config.top_p = 1.0
    assert validate(minimal_config).ok  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "field, bad, good",
    [
        ("presence_penalty", -2.01, -2.0),
        ("frequency_penalty", 2.5, 2.0),
        ("n", 0, 1),
        ("max_tokens", -1, 0),
    ],
)
def test_numeric_bounds(minimal_config, field, bad, good):
    setattr(minimal_config, field, bad)
    report = validate(minimal_config)
    assert [type(v) for v in report.violations] == [RangeViolation]  # nosec B101 - test assertion
    assert report.fields == [field]  # nosec B101 - test assertion
    setattr(minimal_config, field, good)
    assert validate(minimal_config).ok  # nosec B101 - test assertion


def test_nan_is_a_range_violation(minimal_config):
    minimal_config.temperature = math.nan
    assert validate(minimal_config).fields == ["temperature"]  # nosec B101 - test assertion


def test_integer_fields_reject_floats_and_bools(minimal_config):
    minimal_config.n = 1.5  # type: ignore[assignment]
    minimal_config.max_tokens = True  # type: ignore[assignment]
    report = validate(minimal_config)
    assert all(isinstance(v, InvalidFieldType) for v in report.violations)  # nosec B101 - test assertion
    assert report.fields == ["n", "max_tokens"]  # nosec B101 - test assertion


def test_empty_messages_is_missing_required(full_config):
    full_config.messages = []
    report = validate(full_config)
    assert len(report.violations) == 1  # nosec B101 - test assertion
    assert isinstance(report.violations[0], MissingRequiredField)  # nosec B101 - test assertion
    assert report.violations[0].field == "messages"  # nosec B101 - test assertion


@pytest.mark.parametrize("model", [None, "", "   "])
def test_model_is_required(minimal_config, model):
    minimal_config.model = model
    report = validate(minimal_config)
    assert report.fields == ["model"]  # nosec B101 - test assertion
    assert report.codes == [ErrorCode.MISSING_REQUIRED]  # nosec B101 - test assertion


def test_message_roles_and_content_are_checked(minimal_config):
    minimal_config.messages = [
        Message(role="robot", content="x"),  # type: ignore[arg-type]
        Message(role="user", content=""),
        Message(role="assistant", content=""),
    ]
    report = validate(minimal_config)
    assert report.fields == ["messages[0].role", "messages[1].content"]  # nosec B101 - test assertion
    assert isinstance(report.violations[0], InvalidEnumValue)  # nosec B101 - test assertion


def test_conflicts_surface_as_violations(minimal_config):
    minimal_config.stop_single = "X"
    minimal_config.stop_list = ["Y"]
    minimal_config.function_list = [FunctionDefinition(name="f")]
    minimal_config.functions_raw = [{"name": "g"}]
    minimal_config.response_format_object = ResponseFormat.json()
    minimal_config.response_format_enum = ResponseFormatKind.TEXT
    report = validate(minimal_config)
    assert [v.field for v in report.violations] == ["functions", "stop", "response_format"]  # nosec B101 - test assertion
    assert all(isinstance(v, MutualExclusionConflict) for v in report.violations)  # nosec B101 - test assertion
    assert report.resolved is None  # nosec B101 - test assertion


def test_fail_complete_collects_every_violation(minimal_config):
    minimal_config.messages = []
    minimal_config.temperature = 3.0
    minimal_config.stop_single = "X"
    minimal_config.stop_list = ["Y"]
    report = validate(minimal_config)
    assert report.fields == ["messages", "stop", "temperature"]  # nosec B101 - test assertion
    assert not report.fail_fast  # nosec B101 - test assertion


def test_fail_fast_stops_at_first_violation(minimal_config):
    minimal_config.messages = []
    minimal_config.temperature = 3.0
    report = validate(minimal_config, ValidationPolicy(fail_fast=True))
    assert report.fields == ["messages"]  # nosec B101 - test assertion
    assert report.fail_fast  # nosec B101 - test assertion
    assert report.resolved is None  # nosec B101 - test assertion


def test_stop_list_over_limit_is_not_rejected(minimal_config):
    minimal_config.stop_list = ["a", "b", "c", "d", "e"]
    report = validate(minimal_config)
    assert report.ok  # nosec B101 - test assertion
    assert report.resolved.stop == ["a", "b", "c", "d", "e"]  # nosec B101 - test assertion


def test_stop_items_must_be_strings(minimal_config):
    minimal_config.stop_list = ["a", 3]  # type: ignore[list-item]
    assert validate(minimal_config).fields == ["stop[1]"]  # nosec B101 - test assertion


def test_logit_bias_checks(minimal_config):
    minimal_config.logit_bias = {"50256": -100, "42": 100.5, "abc": 1}
    report = validate(minimal_config)
    assert report.fields == ["logit_bias[42]", "logit_bias[abc]"]  # nosec B101 - test assertion
    assert isinstance(report.violations[0], RangeViolation)  # nosec B101 - test assertion
    assert isinstance(report.violations[1], InvalidFieldType)  # nosec B101 - test assertion


@pytest.mark.parametrize("value", ["none", "auto", {"name": "lookup"}])
def test_function_call_accepted_shapes(minimal_config, value):
    minimal_config.function_call = value
    assert validate(minimal_config).ok  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "value, field",
    [("always", "function_call"), ({"name": ""}, "function_call.name"), (7, "function_call")],
)
def test_function_call_rejected_shapes(minimal_config, value, field):
    minimal_config.function_call = value
    assert validate(minimal_config).fields == [field]  # nosec B101 - test assertion


def test_function_call_shape_check_can_be_disabled(minimal_config):
    minimal_config.function_call = "always"
    assert validate(minimal_config, ValidationPolicy(strict_function_call=False)).ok  # nosec B101 - test assertion


def test_function_definitions_need_names(minimal_config):
    minimal_config.function_list = [FunctionDefinition(name="ok"), FunctionDefinition(name="")]
    assert validate(minimal_config).fields == ["functions[1].name"]  # nosec B101 - test assertion


def test_unknown_structured_response_format_type(minimal_config):
    minimal_config.response_format_object = ResponseFormat(type="xml")
    assert validate(minimal_config).fields == ["response_format.type"]  # nosec B101 - test assertion


def test_scalar_types(minimal_config):
    minimal_config.stream = "yes"  # type: ignore[assignment]
    minimal_config.user = 5  # type: ignore[assignment]
    minimal_config.seed = "1"  # type: ignore[assignment]
    assert validate(minimal_config).fields == ["stream", "user", "seed"]  # nosec B101 - test assertion


def test_ensure_valid_raises_aggregate_with_typed_violations(minimal_config):
    minimal_config.temperature = 2.5
    minimal_config.n = 0
    with pytest.raises(RequestValidationError) as info:
        ensure_valid(minimal_config)
    err = info.value
    assert err.code is ErrorCode.VALIDATION  # nosec B101 - test assertion
    assert err.fields == ["temperature", "n"]  # nosec B101 - test assertion
    assert all(isinstance(v, RangeViolation) for v in err.violations)  # nosec B101 - test assertion
    assert "2 violations" in str(err)  # nosec B101 - test assertion


def test_ensure_valid_returns_resolved_fields(minimal_config):
    minimal_config.stop_single = "X"
    resolved = ensure_valid(minimal_config)
    assert resolved.stop == ["X"]  # nosec B101 - test assertion
    assert resolved.functions is None and resolved.response_format is None  # nosec B101 - test assertion


def test_configuration_validate_method_and_protocols(minimal_config):
    assert minimal_config.validate().ok  # nosec B101 - replaces the unconditional failure
    for proto in (HasModel, HasTemperature, HasUser, SupportsValidation):
        assert isinstance(minimal_config, proto)  # nosec B101 - test assertion


def test_validation_is_repeatable(minimal_config):
    minimal_config.temperature = 5
    assert validate(minimal_config) == validate(minimal_config)  # nosec B101 - test assertion


@pytest.mark.parametrize("value", [5, "lookup"])
def test_non_sequence_function_list_is_reported_not_raised(minimal_config, value):
    minimal_config.function_list = value  # type: ignore[assignment]
    report = validate(minimal_config)
    assert not report.ok  # nosec B101 - test assertion
    assert report.fields == ["functions"]  # nosec B101 - test assertion
    assert all(isinstance(v, InvalidFieldType) for v in report.violations)  # nosec B101 - test assertion
    assert report.resolved is None  # nosec B101 - test assertion


def test_unsupported_structured_response_format_shape(minimal_config):
    minimal_config.response_format_object = 5  # type: ignore[assignment]
    report = validate(minimal_config)
    assert report.fields == ["response_format"]  # nosec B101 - test assertion
    assert isinstance(report.violations[0], InvalidFieldType)  # nosec B101 - test assertion
    assert report.resolved is None  # nosec B101 - test assertion
    with pytest.raises(RequestValidationError):
        ensure_valid(minimal_config)


def test_empty_shorthand_counts_as_unset(minimal_config):
    minimal_config.response_format_enum = ""  # type: ignore[assignment]
    report = validate(minimal_config)
    assert report.ok  # nosec B101 - test assertion
    assert report.resolved.response_format is None  # nosec B101 - test assertion
