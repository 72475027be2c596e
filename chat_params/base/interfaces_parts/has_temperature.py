"""HasTemperature Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasTemperature(Protocol):
    """Request objects carrying a sampling temperature."""

    temperature: Optional[float]
