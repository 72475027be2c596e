"""ValidationReport: the outcome of one validation run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import ErrorCode, RequestError, RequestValidationError
from ..resolution.resolved_fields import ResolvedFields


@dataclass(frozen=True)
class ValidationReport:
    """Ordered violations plus the resolved pair values when resolution succeeded.

    Attributes:
        violations: Typed errors in detection order (empty when valid).
        resolved: Canonical pair values; ``None`` when any pair failed to
            resolve or validation stopped before resolving (fail-fast).
        fail_fast: Whether the run stopped at the first violation.
    """

    violations: Tuple[RequestError, ...] = ()
    resolved: Optional[ResolvedFields] = None
    fail_fast: bool = False

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def fields(self) -> List[str]:
        """Distinct offending field names in detection order."""
        out: List[str] = []
        for v in self.violations:
            if v.field is not None and v.field not in out:
                out.append(v.field)
        return out

    @property
    def codes(self) -> List[ErrorCode]:
        return [v.code for v in self.violations]

    def raise_for_violations(self) -> None:
        """Raise :class:`RequestValidationError` when any rule failed."""
        if self.violations:
            raise RequestValidationError(self.violations)


__all__ = ["ValidationReport"]
