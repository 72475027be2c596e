"""
Structured request error exception type.

Base class for every failure produced while resolving or validating a
request configuration. Carries a normalized `ErrorCode` and the logical field
name so callers can branch on the failure without parsing messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class RequestError(Exception):
    """Represents a structured request error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        field: Wire name of the logical field at fault, when one applies.
    """

    code: ErrorCode
    message: str
    field: Optional[str] = None

    def __str__(self) -> str:
        """Return a compact string combining field, code, and message."""
        return f"{self.field or '-'} {self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping for structured logs."""
        data: Dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.field is not None:
            data["field"] = self.field
        return data


__all__ = ["RequestError"]
