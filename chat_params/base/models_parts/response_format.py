"""
Response format value record and its shorthand enumeration.

``ResponseFormat`` is the structured form sent on the wire. ``ResponseFormatKind``
is the caller-facing shorthand that resolution translates into the structured
form.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..constants import RESPONSE_FORMAT_JSON, RESPONSE_FORMAT_TEXT


class ResponseFormatKind(str, Enum):
    """Shorthand for the two structured response formats."""

    TEXT = "text"
    JSON = "json"

    @property
    def wire_type(self) -> str:
        """Return the structured ``type`` value this shorthand stands for."""
        return RESPONSE_FORMAT_JSON if self is ResponseFormatKind.JSON else RESPONSE_FORMAT_TEXT


@dataclass(frozen=True)
class ResponseFormat:
    """Structured response format.

    Attributes:
        type: ``"text"`` or ``"json_object"``; ``None`` leaves the slot
            effectively empty.
    """

    type: Optional[str] = None

    @classmethod
    def json(cls) -> "ResponseFormat":
        return cls(type=RESPONSE_FORMAT_JSON)

    @classmethod
    def text(cls) -> "ResponseFormat":
        return cls(type=RESPONSE_FORMAT_TEXT)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type}


__all__ = ["ResponseFormat", "ResponseFormatKind"]
