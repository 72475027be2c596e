"""Core request model, resolution, validation and wire projection."""

from .errors import (
    ErrorCode,
    InvalidEnumValue,
    InvalidFieldType,
    MissingRequiredField,
    MutualExclusionConflict,
    RangeViolation,
    RequestError,
    RequestValidationError,
)
from .interfaces import HasModel, HasTemperature, HasUser, SupportsValidation
from .models import (
    AlternateFieldPair,
    FunctionDefinition,
    Message,
    RequestConfiguration,
    ResponseFormat,
    ResponseFormatKind,
)
from .resolution import ALTERNATE_FIELD_PAIRS, Resolution, ResolvedFields, resolve_all, try_resolve
from .validation import ValidationReport, ensure_valid, validate
from .wire import WIRE_FIELD_NAMES, ChatCompletionPayload, to_wire, to_wire_json

__all__ = [
    "ErrorCode",
    "RequestError",
    "MutualExclusionConflict",
    "InvalidEnumValue",
    "InvalidFieldType",
    "RangeViolation",
    "MissingRequiredField",
    "RequestValidationError",
    "HasModel",
    "HasTemperature",
    "HasUser",
    "SupportsValidation",
    "AlternateFieldPair",
    "FunctionDefinition",
    "Message",
    "RequestConfiguration",
    "ResponseFormat",
    "ResponseFormatKind",
    "ALTERNATE_FIELD_PAIRS",
    "Resolution",
    "ResolvedFields",
    "resolve_all",
    "try_resolve",
    "ValidationReport",
    "validate",
    "ensure_valid",
    "WIRE_FIELD_NAMES",
    "ChatCompletionPayload",
    "to_wire",
    "to_wire_json",
]
