"""Validation policy model.

Purpose
-------
Carry the knobs of one validation run: whether to stop at the first violation,
how long a stop list may grow before a warning is logged, and whether
``function_call`` is checked for shape.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation of the knobs themselves and
  ``model_validate`` when loading from a file.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .defaults import DEFAULT_FAIL_FAST, DEFAULT_STRICT_FUNCTION_CALL, STOP_SEQUENCE_LIMIT


class ValidationPolicy(BaseModel):
    """Settings applied by the validation engine.

    Attributes
    ----------
    fail_fast:
        Stop at the first violation instead of collecting all of them.
    stop_limit:
        Stop lists longer than this are reported with a warning log event.
    strict_function_call:
        Reject ``function_call`` values other than ``"none"``, ``"auto"`` or a
        mapping with a non-empty ``name``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fail_fast: bool = DEFAULT_FAIL_FAST
    stop_limit: int = Field(default=STOP_SEQUENCE_LIMIT, ge=1)
    strict_function_call: bool = DEFAULT_STRICT_FUNCTION_CALL


__all__ = ["ValidationPolicy"]
