"""Error for a value outside its field's known set."""
from __future__ import annotations

from typing import Any, Dict, Iterable

from .error_code import ErrorCode
from .request_error import RequestError


class InvalidEnumValue(RequestError):
    """A shorthand or enumerated value is not one of the accepted members."""

    def __init__(self, field: str, value: Any, allowed: Iterable[str] = ()) -> None:
        allowed_t = tuple(allowed)
        suffix = f"; expected one of {', '.join(allowed_t)}" if allowed_t else ""
        super().__init__(
            code=ErrorCode.INVALID_ENUM,
            message=f"unrecognized value {value!r}{suffix}",
            field=field,
        )
        self.value = value
        self.allowed = allowed_t

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["value"] = repr(self.value)
        return data


__all__ = ["InvalidEnumValue"]
