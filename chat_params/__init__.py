"""chat_params package

Parameter model and validation for a single outbound chat completion request.

Purpose:
    Let callers populate a request through several equivalent input shapes
    (a single stop string or a list, typed or raw function definitions, a
    structured or shorthand response format), then resolve each logical field
    to one canonical value, reject conflicting alternates, range-check the
    sampling parameters, and project the result onto the endpoint's wire
    field names. Transport, retries and response decoding live elsewhere.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`RequestConfiguration`, :class:`Message`,
      :class:`FunctionDefinition`, :class:`ResponseFormat`,
      :class:`ResponseFormatKind`
    - Pipeline: :func:`validate`, :func:`ensure_valid`, :func:`to_wire`,
      :func:`to_wire_json`, :func:`resolve_all`
    - Errors: :class:`RequestError` and its typed subclasses
    - Config: :class:`ValidationPolicy`, :func:`load_policy`
"""

import logging

from .base import (
    ALTERNATE_FIELD_PAIRS,
    WIRE_FIELD_NAMES,
    ChatCompletionPayload,
    ErrorCode,
    FunctionDefinition,
    InvalidEnumValue,
    InvalidFieldType,
    Message,
    MissingRequiredField,
    MutualExclusionConflict,
    RangeViolation,
    RequestConfiguration,
    RequestError,
    RequestValidationError,
    ResponseFormat,
    ResponseFormatKind,
    ValidationReport,
    ensure_valid,
    resolve_all,
    to_wire,
    to_wire_json,
    try_resolve,
    validate,
)
from .config import ValidationPolicy, load_policy

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "RequestConfiguration",
    "Message",
    "FunctionDefinition",
    "ResponseFormat",
    "ResponseFormatKind",
    "ALTERNATE_FIELD_PAIRS",
    "WIRE_FIELD_NAMES",
    "ChatCompletionPayload",
    "ValidationReport",
    "validate",
    "ensure_valid",
    "resolve_all",
    "try_resolve",
    "to_wire",
    "to_wire_json",
    "ErrorCode",
    "RequestError",
    "MutualExclusionConflict",
    "InvalidEnumValue",
    "InvalidFieldType",
    "RangeViolation",
    "MissingRequiredField",
    "RequestValidationError",
    "ValidationPolicy",
    "load_policy",
]

logger = logging.getLogger(__name__)
