"""Result wrapper for exception-free resolution."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import RequestError


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one logical field.

    Exactly one of ``value``/``error`` is meaningful: when ``error`` is set the
    resolution failed and ``value`` is ``None``.
    """

    value: Any = None
    error: Optional[RequestError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


__all__ = ["Resolution"]
