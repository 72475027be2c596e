"""Projection of a validated configuration onto wire field names."""

from .payload import ChatCompletionPayload, FunctionPayload, MessagePayload, ResponseFormatPayload
from .projector import WIRE_FIELD_NAMES, build_payload, project, to_wire, to_wire_json

__all__ = [
    "ChatCompletionPayload",
    "FunctionPayload",
    "MessagePayload",
    "ResponseFormatPayload",
    "WIRE_FIELD_NAMES",
    "build_payload",
    "project",
    "to_wire",
    "to_wire_json",
]
