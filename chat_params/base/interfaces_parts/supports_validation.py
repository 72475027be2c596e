"""SupportsValidation Protocol (single-class module).

Implemented by request objects that can check themselves before being handed
to a transport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.report import ValidationReport


@runtime_checkable
class SupportsValidation(Protocol):
    """Interface for objects exposing ``validate()``."""

    def validate(self, policy: Any = None) -> "ValidationReport":  # pragma: no cover - protocol
        """Return a report of every rule violation."""
        ...
