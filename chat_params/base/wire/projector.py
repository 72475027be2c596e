"""
Wire projection: validated configuration -> canonical payload mapping.

This is the explicit validate-then-serialize stage. ``to_wire`` always runs the
validation engine first, so conflicts and out-of-range values surface before a
transport ever sees the request. The returned mapping uses wire names only and
omits every optional field that is absent.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...config.policy import ValidationPolicy
from ..logging import LogContext, get_logger, log_event
from ..models_parts.function_definition import FunctionDefinition
from ..models_parts.request_configuration import RequestConfiguration
from ..resolution.resolved_fields import ResolvedFields
from ..validation.engine import ensure_valid
from .payload import ChatCompletionPayload

logger = get_logger("chat_params.wire")

# Logical field (configuration slot or resolved pair) -> wire name.
WIRE_FIELD_NAMES: Dict[str, str] = {
    "messages": "messages",
    "functions": "functions",
    "top_p": "top_p",
    "n": "n",
    "stream": "stream",
    "stop": "stop",
    "max_tokens": "max_tokens",
    "presence_penalty": "presence_penalty",
    "frequency_penalty": "frequency_penalty",
    "logit_bias": "logit_bias",
    "function_call": "function_call",
    "response_format": "response_format",
    "seed": "seed",
    "model": "model",
    "temperature": "temperature",
    "user": "user",
}

_PASSTHROUGH = (
    "top_p",
    "n",
    "stream",
    "max_tokens",
    "presence_penalty",
    "frequency_penalty",
    "logit_bias",
    "function_call",
    "seed",
    "temperature",
    "user",
)


def _functions_value(value: Any) -> Any:
    if isinstance(value, list) and value and all(isinstance(f, FunctionDefinition) for f in value):
        return [f.to_dict() for f in value]
    return value


def build_payload(config: RequestConfiguration, resolved: ResolvedFields) -> ChatCompletionPayload:
    """Build the Pydantic payload from ``config`` and its resolved pair values.

    The caller is responsible for having validated ``config``; use
    :func:`to_wire` for the full pipeline.
    """
    data: Dict[str, Any] = {
        "model": config.model,
        "messages": [m.to_dict() for m in config.messages],
    }
    for name in _PASSTHROUGH:
        value = getattr(config, name)
        if value is not None:
            data[WIRE_FIELD_NAMES[name]] = value
    if resolved.functions is not None:
        data["functions"] = _functions_value(resolved.functions)
    if resolved.stop is not None:
        data["stop"] = resolved.stop
    if resolved.response_format is not None:
        data["response_format"] = resolved.response_format.to_dict()
    return ChatCompletionPayload.model_validate(data)


def project(config: RequestConfiguration, policy: Optional[ValidationPolicy] = None) -> ChatCompletionPayload:
    """Validate ``config`` and return the typed wire payload.

    Raises:
        RequestValidationError: validation failed; nothing is projected.
    """
    resolved = ensure_valid(config, policy)
    payload = build_payload(config, resolved)
    keys: List[str] = sorted(payload.model_dump(exclude_none=True))
    log_event(logger, "request.project", LogContext(model=config.model), keys=keys)
    return payload


def to_wire(config: RequestConfiguration, policy: Optional[ValidationPolicy] = None) -> Dict[str, Any]:
    """Validate ``config`` and return the wire payload as a plain mapping."""
    return project(config, policy).model_dump(exclude_none=True)


def to_wire_json(config: RequestConfiguration, policy: Optional[ValidationPolicy] = None) -> str:
    """Validate ``config`` and return the wire payload as JSON text."""
    return project(config, policy).model_dump_json(exclude_none=True)


__all__ = [
    "WIRE_FIELD_NAMES",
    "build_payload",
    "project",
    "to_wire",
    "to_wire_json",
]
