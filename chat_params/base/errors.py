"""Unified request error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_params.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.request_error import RequestError
from .errors_parts.mutual_exclusion_conflict import MutualExclusionConflict
from .errors_parts.invalid_enum_value import InvalidEnumValue
from .errors_parts.range_violation import RangeViolation, describe_range
from .errors_parts.missing_required_field import MissingRequiredField
from .errors_parts.invalid_field_type import InvalidFieldType
from .errors_parts.request_validation_error import RequestValidationError

__all__ = [
    "ErrorCode",
    "RequestError",
    "MutualExclusionConflict",
    "InvalidEnumValue",
    "RangeViolation",
    "MissingRequiredField",
    "InvalidFieldType",
    "RequestValidationError",
    "describe_range",
]
