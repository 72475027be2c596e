"""
AlternateFieldPair declaration.

Declares, for one logical parameter, the canonical slot and the alternate
slot(s) on :class:`RequestConfiguration` that can express it, together with
the resolver computing the canonical value. At most one of the slots may be
populated when the pair is resolved.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Tuple

if TYPE_CHECKING:
    from .request_configuration import RequestConfiguration


@dataclass(frozen=True)
class AlternateFieldPair:
    """Relationship between a logical field and its mutually exclusive slots.

    Attributes:
        logical_name: Wire name of the logical field (``"stop"``, ...).
        canonical_slot: Attribute name of the canonical slot.
        alternate_slots: Attribute names of the alternate slots.
        resolve: Pure function computing the canonical value or raising.
    """

    logical_name: str
    canonical_slot: str
    alternate_slots: Tuple[str, ...]
    resolve: Callable[["RequestConfiguration"], Any]

    @property
    def slots(self) -> Tuple[str, ...]:
        """All slot names, canonical first."""
        return (self.canonical_slot, *self.alternate_slots)

    def populated_slots(self, config: "RequestConfiguration") -> Tuple[str, ...]:
        """Return the names of the slots currently holding a value."""
        return tuple(s for s in self.slots if config.is_populated(s))


__all__ = ["AlternateFieldPair"]
