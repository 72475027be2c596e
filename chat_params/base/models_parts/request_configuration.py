"""
RequestConfiguration: the mutable holder of every slot of one outbound request.

Population is unconstrained: writes store values and nothing else, so callers
can build a request incrementally and overwrite slots freely. Writing a
canonical slot never clears its alternate (and vice versa); a conflicting pair
is only detected when the logical field is resolved or the whole request is
validated. One instance describes exactly one request and is not designed for
concurrent mutation.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from .function_definition import FunctionDefinition
from .message import Message
from .response_format import ResponseFormat, ResponseFormatKind

if TYPE_CHECKING:
    from ...config.policy import ValidationPolicy
    from ..resolution.resolved_fields import ResolvedFields
    from ..validation.report import ValidationReport

FunctionCall = Union[str, Dict[str, Any]]


@dataclass
class RequestConfiguration:
    """Every canonical and alternate slot of a chat completion request.

    Attributes:
        messages: Ordered conversation; required and non-empty.
        function_list: Typed function definitions (alternate of ``functions_raw``).
        functions_raw: Opaque pre-built ``functions`` value.
        top_p: Nucleus sampling mass in ``(0, 1]``.
        n: Number of completions to generate (``>= 1``).
        stream: Enable incremental delivery.
        stop_single: One stop sequence (alternate of ``stop_list``).
        stop_list: Up to four stop sequences.
        max_tokens: Completion token cap (``>= 0``).
        presence_penalty: Penalty in ``[-2, 2]``.
        frequency_penalty: Penalty in ``[-2, 2]``.
        logit_bias: Token id (string) to bias in ``[-100, 100]``.
        function_call: ``"none"``, ``"auto"`` or ``{"name": ...}``.
        response_format_object: Structured response format.
        response_format_enum: Shorthand translated into the structured form.
        seed: Best-effort determinism hint.
        model: Model identifier; required.
        temperature: Sampling temperature in ``[0, 2]``.
        user: Opaque end-user identifier.
    """

    messages: List[Message] = field(default_factory=list)
    function_list: Optional[List[FunctionDefinition]] = None
    functions_raw: Any = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop_single: Optional[str] = None
    stop_list: Optional[List[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    function_call: Optional[FunctionCall] = None
    response_format_object: Optional[ResponseFormat] = None
    response_format_enum: Optional[ResponseFormatKind] = None
    seed: Optional[int] = None
    model: Optional[str] = None
    temperature: Optional[float] = None
    user: Optional[str] = None

    def is_populated(self, slot: str) -> bool:
        """Return True when ``slot`` holds a non-empty value.

        ``None``, empty strings, empty sequences and empty mappings count as
        unset. A structured response format (dataclass or mapping) counts as
        set only when its ``type`` is non-empty.
        """
        value = getattr(self, slot)
        if value is None:
            return False
        if isinstance(value, ResponseFormat):
            return bool(value.type)
        if slot == "response_format_object" and isinstance(value, Mapping):
            return bool(value.get("type"))
        if isinstance(value, (str, Sequence, Mapping)):
            return len(value) > 0
        return True

    def add_message(self, role: str, content: str, name: Optional[str] = None) -> "RequestConfiguration":
        """Append a message and return ``self`` for chaining."""
        self.messages.append(Message(role=role, content=content, name=name))  # type: ignore[arg-type]
        return self

    # ---- resolution (lazy, on demand) ----

    def resolve_functions(self) -> Any:
        from ..resolution.resolvers import resolve_functions

        return resolve_functions(self)

    def resolve_stop(self) -> Optional[List[str]]:
        from ..resolution.resolvers import resolve_stop

        return resolve_stop(self)

    def resolve_response_format(self) -> Optional[ResponseFormat]:
        from ..resolution.resolvers import resolve_response_format

        return resolve_response_format(self)

    def resolve(self) -> "ResolvedFields":
        """Resolve every alternate field pair, raising on the first failure."""
        from ..resolution.resolvers import resolve_all

        return resolve_all(self)

    # ---- validation and projection ----

    def validate(self, policy: Optional["ValidationPolicy"] = None) -> "ValidationReport":
        """Run the validation engine and return its report (never raises for rule failures)."""
        from ..validation.engine import validate

        return validate(self, policy)

    def to_wire(self, policy: Optional["ValidationPolicy"] = None) -> Dict[str, Any]:
        """Validate, resolve and project into the wire payload mapping."""
        from ..wire.projector import to_wire

        return to_wire(self, policy)


__all__ = ["RequestConfiguration", "FunctionCall"]
