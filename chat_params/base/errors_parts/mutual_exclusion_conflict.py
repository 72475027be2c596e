"""Conflict raised when two alternate slots of one logical field are populated."""
from __future__ import annotations

from .error_code import ErrorCode
from .request_error import RequestError


class MutualExclusionConflict(RequestError):
    """Two alternates of the same logical field were both populated.

    The conflict is never resolved by picking a winner; the caller must clear
    one of the slots.
    """

    def __init__(self, field: str, slots: tuple[str, ...] = ()) -> None:
        detail = f" ({' and '.join(slots)})" if slots else ""
        super().__init__(
            code=ErrorCode.CONFLICT,
            message=f"alternate slots for '{field}' are both set{detail}; one of them must be empty",
            field=field,
        )
        self.slots = tuple(slots)


__all__ = ["MutualExclusionConflict"]
