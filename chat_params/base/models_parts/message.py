"""
Message value record used in request configurations.

Defines the immutable `Message` dataclass and the `Role` literal. Messages are
owned by the configuration that holds them and have no lifecycle of their own.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional


# Message author roles.
Role = Literal["system", "user", "assistant", "function"]


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"``,
            ``"assistant"``, or ``"function"``).
        content: Plain text content of the message.
        name: Optional author name; required by the endpoint for
            ``"function"`` messages and emitted only when set.
    """

    role: Role
    content: str
    name: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str, name: Optional[str] = None) -> "Message":
        return cls(role="user", content=content, name=name)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation (``name`` omitted when unset)."""
        data: Dict[str, Any] = {"role": self.role, "content": self.content}
        if self.name is not None:
            data["name"] = self.name
        return data


__all__ = [
    "Message",
    "Role",
]
