"""
FunctionDefinition value record.

Describes one function the model may generate JSON arguments for. The
``parameters`` mapping is a JSON-schema-shaped object passed through verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FunctionDefinition:
    """A callable function exposed to the model.

    Attributes:
        name: Function name the model refers to when calling it.
        description: Optional natural-language description.
        parameters: Optional JSON-schema object describing the arguments.
    """

    name: str
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = field(default=None, hash=False, compare=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation, omitting unset optional keys."""
        data: Dict[str, Any] = {"name": self.name}
        if self.description is not None:
            data["description"] = self.description
        if self.parameters is not None:
            data["parameters"] = dict(self.parameters)
        return data


__all__ = ["FunctionDefinition"]
