"""
Validation engine for request configurations.

Runs every alternate-pair resolution plus the required-field, range and shape
rules over one :class:`RequestConfiguration` and aggregates the outcome into a
:class:`ValidationReport`.

Policy
------
Fail-complete by default: every rule runs and all violations are reported in
detection order. ``ValidationPolicy(fail_fast=True)`` stops at the first one.
Rules are generators, so fail-fast also skips the remaining work.

Rule failures never raise from :func:`validate`; :func:`ensure_valid` raises a
:class:`RequestValidationError` carrying the typed violations.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Callable, Iterator, List, Optional

from ...config import default_policy
from ...config.defaults import (
    FREQUENCY_PENALTY_RANGE,
    LOGIT_BIAS_RANGE,
    MAX_TOKENS_RANGE,
    N_RANGE,
    PRESENCE_PENALTY_RANGE,
    TEMPERATURE_RANGE,
    TOP_P_LOW_INCLUSIVE,
    TOP_P_RANGE,
)
from ...config.policy import ValidationPolicy
from ..constants import FUNCTION_CALL_MODES, MESSAGE_ROLES, RESPONSE_FORMAT_TYPES
from ..errors import (
    InvalidEnumValue,
    InvalidFieldType,
    MissingRequiredField,
    RequestError,
)
from ..logging import LogContext, get_logger, log_event
from ..models_parts.function_definition import FunctionDefinition
from ..models_parts.message import Message
from ..models_parts.request_configuration import RequestConfiguration
from ..models_parts.response_format import ResponseFormat
from ..resolution.pairs import ALTERNATE_FIELD_PAIRS, PAIRS_BY_NAME
from ..resolution.resolved_fields import ResolvedFields
from ..resolution.resolvers import resolve_all
from .checks import check_range, check_type, is_integer
from .report import ValidationReport

logger = get_logger("chat_params.validation")

Rule = Callable[[RequestConfiguration, ValidationPolicy], Iterator[RequestError]]


def _required(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    if not config.messages:
        yield MissingRequiredField("messages")
    if config.model is None or (isinstance(config.model, str) and not config.model.strip()):
        yield MissingRequiredField("model")
    elif not isinstance(config.model, str):
        yield InvalidFieldType("model", config.model, "string")


def _messages(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    if not isinstance(config.messages, Sequence) or isinstance(config.messages, str):
        yield InvalidFieldType("messages", config.messages, "sequence of Message")
        return
    for i, msg in enumerate(config.messages):
        prefix = f"messages[{i}]"
        if not isinstance(msg, Message):
            yield InvalidFieldType(prefix, msg, "Message")
            continue
        if msg.role not in MESSAGE_ROLES:
            yield InvalidEnumValue(f"{prefix}.role", msg.role, MESSAGE_ROLES)
        if not isinstance(msg.content, str):
            yield InvalidFieldType(f"{prefix}.content", msg.content, "string")
        elif not msg.content and msg.role != "assistant":
            yield MissingRequiredField(f"{prefix}.content")


def _pairs(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    for pair in ALTERNATE_FIELD_PAIRS:
        try:
            pair.resolve(config)
        except RequestError as exc:
            yield exc
        except TypeError:
            # Slot holds something the resolver cannot iterate.
            slot = pair.populated_slots(config)[0]
            yield InvalidFieldType(pair.logical_name, getattr(config, slot), "sequence")


def _response_format_type(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    value = config.response_format_object
    if value is None or config.is_populated("response_format_enum"):
        return
    if isinstance(value, Mapping):
        kind = value.get("type")
    elif isinstance(value, ResponseFormat):
        kind = value.type
    elif isinstance(value, str):
        kind = value
    else:
        yield InvalidFieldType("response_format", value, "ResponseFormat")
        return
    if kind and kind not in RESPONSE_FORMAT_TYPES:
        yield InvalidEnumValue("response_format.type", kind, RESPONSE_FORMAT_TYPES)


def _functions(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    functions = config.function_list
    if functions is None:
        return
    if isinstance(functions, str) or not isinstance(functions, Sequence):
        yield InvalidFieldType("functions", functions, "sequence of FunctionDefinition")
        return
    for i, fn in enumerate(functions):
        if not isinstance(fn, FunctionDefinition):
            yield InvalidFieldType(f"functions[{i}]", fn, "FunctionDefinition")
        elif not fn.name:
            yield MissingRequiredField(f"functions[{i}].name")


def _stop(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    err = check_type("stop", config.stop_single, str, "string")
    if err:
        yield err
    stops = config.stop_list
    if stops is None:
        return
    if isinstance(stops, str) or not isinstance(stops, Sequence):
        yield InvalidFieldType("stop", stops, "sequence of strings")
        return
    for i, item in enumerate(stops):
        if not isinstance(item, str):
            yield InvalidFieldType(f"stop[{i}]", item, "string")
    if len(stops) > policy.stop_limit:
        log_event(
            logger,
            "request.stop_limit",
            LogContext(model=config.model if isinstance(config.model, str) else None),
            level=logging.WARNING,
            count=len(stops),
            limit=policy.stop_limit,
        )


def _ranges(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    checks = (
        check_range("temperature", config.temperature, TEMPERATURE_RANGE),
        check_range("top_p", config.top_p, TOP_P_RANGE, low_inclusive=TOP_P_LOW_INCLUSIVE),
        check_range("presence_penalty", config.presence_penalty, PRESENCE_PENALTY_RANGE),
        check_range("frequency_penalty", config.frequency_penalty, FREQUENCY_PENALTY_RANGE),
        check_range("n", config.n, N_RANGE, integer=True),
        check_range("max_tokens", config.max_tokens, MAX_TOKENS_RANGE, integer=True),
    )
    for err in checks:
        if err:
            yield err


def _logit_bias(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    bias = config.logit_bias
    if bias is None:
        return
    if not isinstance(bias, Mapping):
        yield InvalidFieldType("logit_bias", bias, "mapping of token id to bias")
        return
    for token, value in bias.items():
        field = f"logit_bias[{token}]"
        if not isinstance(token, str) or not token.isdigit():
            yield InvalidFieldType(field, token, "token id string")
            continue
        err = check_range(field, value, LOGIT_BIAS_RANGE)
        if err:
            yield err


def _function_call(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    value = config.function_call
    if value is None or not policy.strict_function_call:
        return
    if isinstance(value, str):
        if value not in FUNCTION_CALL_MODES:
            yield InvalidEnumValue("function_call", value, FUNCTION_CALL_MODES)
        return
    if isinstance(value, Mapping):
        name = value.get("name")
        if not isinstance(name, str) or not name:
            yield MissingRequiredField("function_call.name")
        return
    yield InvalidFieldType("function_call", value, "'none', 'auto' or {'name': ...}")


def _scalars(config: RequestConfiguration, policy: ValidationPolicy) -> Iterator[RequestError]:
    for err in (
        check_type("stream", config.stream, bool, "boolean"),
        check_type("user", config.user, str, "string"),
    ):
        if err:
            yield err
    if config.seed is not None and not is_integer(config.seed):
        yield InvalidFieldType("seed", config.seed, "integer")


RULES: tuple[Rule, ...] = (
    _required,
    _messages,
    _pairs,
    _response_format_type,
    _functions,
    _stop,
    _ranges,
    _logit_bias,
    _function_call,
    _scalars,
)


def _collect(config: RequestConfiguration, policy: ValidationPolicy) -> List[RequestError]:
    violations: List[RequestError] = []
    for rule in RULES:
        for err in rule(config, policy):
            violations.append(err)
            if policy.fail_fast:
                return violations
    return violations


def validate(config: RequestConfiguration, policy: Optional[ValidationPolicy] = None) -> ValidationReport:
    """Validate ``config`` and return a report; rule failures are not raised.

    When every alternate pair resolves, the report also carries the resolved
    canonical values so callers do not resolve twice.
    """
    if policy is None:
        policy = default_policy()
    violations = _collect(config, policy)
    resolved: Optional[ResolvedFields] = None
    pairs_clean = not any(err.field in PAIRS_BY_NAME for err in violations)
    # Under fail-fast an earlier violation may have skipped the pair rule entirely.
    if pairs_clean and (not policy.fail_fast or not violations):
        resolved = resolve_all(config)
    report = ValidationReport(violations=tuple(violations), resolved=resolved, fail_fast=policy.fail_fast)
    log_event(
        logger,
        "request.validate",
        LogContext(model=config.model if isinstance(config.model, str) else None),
        level=logging.INFO if report.ok else logging.WARNING,
        ok=report.ok,
        violations=len(violations),
        codes=[c.value for c in report.codes] or None,
        fields=report.fields or None,
        fail_fast=policy.fail_fast,
    )
    return report


def ensure_valid(config: RequestConfiguration, policy: Optional[ValidationPolicy] = None) -> ResolvedFields:
    """Validate ``config`` and return its resolved pair values.

    Raises:
        RequestValidationError: one or more rules failed; ``violations``
            holds the typed errors.
    """
    report = validate(config, policy)
    report.raise_for_violations()
    assert report.resolved is not None  # nosec B101 - guaranteed when no violations
    return report.resolved


__all__ = ["RULES", "validate", "ensure_valid"]
