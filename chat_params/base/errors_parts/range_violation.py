"""Error for a numeric parameter outside its allowed interval."""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .error_code import ErrorCode
from .request_error import RequestError

Bounds = Tuple[Optional[float], Optional[float]]


def describe_range(bounds: Bounds, *, low_inclusive: bool = True, high_inclusive: bool = True) -> str:
    """Render ``bounds`` in interval notation, e.g. ``[0, 2]`` or ``(0, 1]``."""
    low, high = bounds
    left = "[" if low_inclusive and low is not None else "("
    right = "]" if high_inclusive and high is not None else ")"
    lo = "-inf" if low is None else f"{low:g}"
    hi = "inf" if high is None else f"{high:g}"
    return f"{left}{lo}, {hi}{right}"


class RangeViolation(RequestError):
    """A numeric value fell outside the interval accepted for its field.

    Attributes:
        value: The offending value as supplied by the caller.
        allowed_range: ``(low, high)`` tuple; ``None`` marks an open end.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        allowed_range: Bounds,
        *,
        low_inclusive: bool = True,
        high_inclusive: bool = True,
    ) -> None:
        interval = describe_range(allowed_range, low_inclusive=low_inclusive, high_inclusive=high_inclusive)
        super().__init__(
            code=ErrorCode.RANGE,
            message=f"value {value!r} is outside {interval}",
            field=field,
        )
        self.value = value
        self.allowed_range = allowed_range
        self.interval = interval

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["value"] = self.value
        data["allowed_range"] = self.interval
        return data


__all__ = ["RangeViolation", "describe_range"]
