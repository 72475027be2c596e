"""Lazy canonical-value resolution for alternate field pairs."""

from .pairs import ALTERNATE_FIELD_PAIRS, PAIRS_BY_NAME
from .resolution import Resolution
from .resolved_fields import ResolvedFields
from .resolvers import (
    coerce_response_format_kind,
    resolve_all,
    resolve_functions,
    resolve_response_format,
    resolve_stop,
    try_resolve,
)

__all__ = [
    "ALTERNATE_FIELD_PAIRS",
    "PAIRS_BY_NAME",
    "Resolution",
    "ResolvedFields",
    "coerce_response_format_kind",
    "resolve_all",
    "resolve_functions",
    "resolve_response_format",
    "resolve_stop",
    "try_resolve",
]
