"""HasUser Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasUser(Protocol):
    """Request objects carrying an opaque end-user identifier."""

    user: Optional[str]
