"""
Pydantic DTOs describing the chat completion wire payload.

Purpose
-------
Give the resolved request a typed wire shape whose field names are exactly the
endpoint's JSON keys. The projector builds these models from an already
validated configuration; Pydantic is used for shape checking and for
``model_dump``/``model_dump_json`` with unset fields excluded.

Failure semantics: construction raises ``pydantic.ValidationError`` only if a
value slipped past the validation engine with an unserializable shape.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class MessagePayload(BaseModel):
    """One message as sent on the wire."""

    model_config = ConfigDict(extra="forbid")

    role: Literal["system", "user", "assistant", "function"]
    content: str
    name: Optional[str] = None


class FunctionPayload(BaseModel):
    """One typed function definition as sent on the wire."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


class ResponseFormatPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["text", "json_object"]


class ChatCompletionPayload(BaseModel):
    """Canonical chat completion request body.

    ``functions`` holds either typed definitions or the caller's raw value;
    every other field maps one-to-one onto the endpoint's JSON keys. Only
    ``model`` and ``messages`` are required.
    """

    model_config = ConfigDict(extra="forbid")

    model: str = Field(..., min_length=1)
    messages: List[MessagePayload] = Field(..., min_length=1)
    functions: Optional[Union[List[FunctionPayload], Any]] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, float]] = None
    function_call: Optional[Union[str, Dict[str, Any]]] = None
    response_format: Optional[ResponseFormatPayload] = None
    seed: Optional[int] = None
    temperature: Optional[float] = None
    user: Optional[str] = None


__all__ = [
    "MessagePayload",
    "FunctionPayload",
    "ResponseFormatPayload",
    "ChatCompletionPayload",
]
