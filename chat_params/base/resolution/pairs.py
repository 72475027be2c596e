"""Declarative table of the alternate field pairs of a chat completion request."""
from __future__ import annotations

from typing import Dict, Tuple

from ..models_parts.alternate_field_pair import AlternateFieldPair
from .resolvers import resolve_functions, resolve_response_format, resolve_stop

FUNCTIONS_PAIR = AlternateFieldPair(
    logical_name="functions",
    canonical_slot="function_list",
    alternate_slots=("functions_raw",),
    resolve=resolve_functions,
)

STOP_PAIR = AlternateFieldPair(
    logical_name="stop",
    canonical_slot="stop_list",
    alternate_slots=("stop_single",),
    resolve=resolve_stop,
)

RESPONSE_FORMAT_PAIR = AlternateFieldPair(
    logical_name="response_format",
    canonical_slot="response_format_object",
    alternate_slots=("response_format_enum",),
    resolve=resolve_response_format,
)

ALTERNATE_FIELD_PAIRS: Tuple[AlternateFieldPair, ...] = (
    FUNCTIONS_PAIR,
    STOP_PAIR,
    RESPONSE_FORMAT_PAIR,
)

PAIRS_BY_NAME: Dict[str, AlternateFieldPair] = {p.logical_name: p for p in ALTERNATE_FIELD_PAIRS}

__all__ = [
    "FUNCTIONS_PAIR",
    "STOP_PAIR",
    "RESPONSE_FORMAT_PAIR",
    "ALTERNATE_FIELD_PAIRS",
    "PAIRS_BY_NAME",
]
