"""
Normalized request error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every request error raised by
resolution or validation. Values are lowercase snake_case and are considered a
stable public contract for logging and for callers mapping failures to
user-facing messages.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFLICT = "conflict"
    INVALID_ENUM = "invalid_enum"
    RANGE = "range"
    MISSING_REQUIRED = "missing_required"
    INVALID_TYPE = "invalid_type"
    VALIDATION = "validation"


__all__ = ["ErrorCode"]
