"""Shared wire constants for chat completion requests.

Central location to avoid scattering magic strings across models, resolvers
and the wire projector.
"""
from __future__ import annotations

# Structured ``response_format.type`` values accepted by the endpoint.
RESPONSE_FORMAT_TEXT = "text"
RESPONSE_FORMAT_JSON = "json_object"
RESPONSE_FORMAT_TYPES = (RESPONSE_FORMAT_TEXT, RESPONSE_FORMAT_JSON)

# Literal ``function_call`` modes; a mapping ``{"name": ...}`` selects one function.
FUNCTION_CALL_NONE = "none"
FUNCTION_CALL_AUTO = "auto"
FUNCTION_CALL_MODES = (FUNCTION_CALL_NONE, FUNCTION_CALL_AUTO)

# Message author roles accepted on the wire.
MESSAGE_ROLES = ("system", "user", "assistant", "function")

__all__ = [
    "RESPONSE_FORMAT_TEXT",
    "RESPONSE_FORMAT_JSON",
    "RESPONSE_FORMAT_TYPES",
    "FUNCTION_CALL_NONE",
    "FUNCTION_CALL_AUTO",
    "FUNCTION_CALL_MODES",
    "MESSAGE_ROLES",
]
