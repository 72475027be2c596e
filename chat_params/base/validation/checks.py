"""Scalar checks shared by the validation rules.

Each helper returns a typed error or ``None``; none of them raise.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional, Tuple

from ..errors import InvalidFieldType, RangeViolation, RequestError

Bounds = Tuple[Optional[float], Optional[float]]


def is_number(value: Any) -> bool:
    """True for real numbers other than ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_range(
    field: str,
    value: Any,
    bounds: Bounds,
    *,
    integer: bool = False,
    low_inclusive: bool = True,
    high_inclusive: bool = True,
) -> Optional[RequestError]:
    """Check ``value`` against ``bounds``; ``None`` values are skipped.

    NaN never satisfies a bound and is reported as a range violation.
    """
    if value is None:
        return None
    if integer and not is_integer(value):
        return InvalidFieldType(field, value, "integer")
    if not is_number(value):
        return InvalidFieldType(field, value, "number")
    low, high = bounds
    number = float(value)
    inside = not math.isnan(number)
    if inside and low is not None:
        inside = number >= low if low_inclusive else number > low
    if inside and high is not None:
        inside = number <= high if high_inclusive else number < high
    if inside:
        return None
    return RangeViolation(field, value, bounds, low_inclusive=low_inclusive, high_inclusive=high_inclusive)


def check_type(field: str, value: Any, expected: type, label: str) -> Optional[RequestError]:
    """Check that a set ``value`` is an instance of ``expected``."""
    if value is None or isinstance(value, expected):
        return None
    return InvalidFieldType(field, value, label)


__all__ = ["check_range", "check_type", "is_number", "is_integer"]
