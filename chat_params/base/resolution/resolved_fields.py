"""Canonical values of every alternate field pair after resolution."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from ..models_parts.response_format import ResponseFormat


@dataclass(frozen=True)
class ResolvedFields:
    """Canonical values for ``functions``, ``stop`` and ``response_format``.

    ``None`` means the logical field is absent and is omitted from the wire
    payload.
    """

    functions: Any = None
    stop: Optional[List[str]] = None
    response_format: Optional[ResponseFormat] = None


__all__ = ["ResolvedFields"]
