"""Aggregate error carrying every violation collected by one validation run."""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .error_code import ErrorCode
from .request_error import RequestError


class RequestValidationError(RequestError):
    """Raised by ``ensure_valid`` when one or more rules failed.

    ``violations`` keeps the typed errors in the order they were detected so
    callers can still match on ``MutualExclusionConflict``, ``RangeViolation``
    and friends.
    """

    def __init__(self, violations: Sequence[RequestError]) -> None:
        items = list(violations)
        if len(items) == 1:
            message = str(items[0])
        else:
            message = f"{len(items)} violations: " + "; ".join(str(v) for v in items)
        super().__init__(code=ErrorCode.VALIDATION, message=message)
        self.violations: List[RequestError] = items

    @property
    def fields(self) -> List[str]:
        """Return the distinct offending field names in detection order."""
        seen: List[str] = []
        for v in self.violations:
            if v.field is not None and v.field not in seen:
                seen.append(v.field)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["violations"] = [v.to_dict() for v in self.violations]
        return data


__all__ = ["RequestValidationError"]
