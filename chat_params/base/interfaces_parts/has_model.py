"""HasModel Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasModel(Protocol):
    """Request objects that name the model they target."""

    model: Optional[str]
