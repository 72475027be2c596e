"""Error for a required field that is absent or empty."""
from __future__ import annotations

from .error_code import ErrorCode
from .request_error import RequestError


class MissingRequiredField(RequestError):
    """A field the wire payload cannot omit was left unset or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REQUIRED,
            message="required field is missing or empty",
            field=field,
        )


__all__ = ["MissingRequiredField"]
