"""Error for a slot populated with a value of the wrong shape."""
from __future__ import annotations

from typing import Any, Dict

from .error_code import ErrorCode
from .request_error import RequestError


class InvalidFieldType(RequestError):
    """A slot holds a value whose shape the wire format cannot carry."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TYPE,
            message=f"expected {expected}, got {type(value).__name__}",
            field=field,
        )
        self.value = value
        self.expected = expected

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["expected"] = self.expected
        return data


__all__ = ["InvalidFieldType"]
