"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_params.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .request_error import RequestError
from .mutual_exclusion_conflict import MutualExclusionConflict
from .invalid_enum_value import InvalidEnumValue
from .range_violation import RangeViolation
from .missing_required_field import MissingRequiredField
from .invalid_field_type import InvalidFieldType
from .request_validation_error import RequestValidationError

__all__ = [
    "ErrorCode",
    "RequestError",
    "MutualExclusionConflict",
    "InvalidEnumValue",
    "RangeViolation",
    "MissingRequiredField",
    "InvalidFieldType",
    "RequestValidationError",
]
