"""
Canonical field resolvers.

One pure function per alternate field pair. Each reads the pair's slots from a
:class:`RequestConfiguration`, returns the canonical value (``None`` when the
logical field is absent), or raises a typed :class:`RequestError`. Resolvers
never mutate the configuration, so resolving twice without intervening writes
yields equal values or the same failure.

Resolution reads several slots without any locking; callers sharing a
configuration across threads must synchronize writes and resolution.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from ..errors import InvalidEnumValue, MutualExclusionConflict, RequestError
from ..models_parts.request_configuration import RequestConfiguration
from ..models_parts.response_format import ResponseFormat, ResponseFormatKind
from .resolution import Resolution
from .resolved_fields import ResolvedFields


def _check_exclusive(config: RequestConfiguration, field: str, *slots: str) -> None:
    populated = tuple(s for s in slots if config.is_populated(s))
    if len(populated) > 1:
        raise MutualExclusionConflict(field, populated)


def resolve_functions(config: RequestConfiguration) -> Any:
    """Resolve ``functions`` from ``function_list`` or ``functions_raw``.

    Returns a new list of :class:`FunctionDefinition` when the typed list is
    set, the raw value unchanged when that is set, and ``None`` otherwise.

    Raises:
        MutualExclusionConflict: both slots are populated.
    """
    _check_exclusive(config, "functions", "function_list", "functions_raw")
    if config.is_populated("function_list"):
        return list(config.function_list or ())
    if config.is_populated("functions_raw"):
        return config.functions_raw
    return None


def resolve_stop(config: RequestConfiguration) -> Optional[List[str]]:
    """Resolve ``stop`` from ``stop_single`` or ``stop_list``.

    A single sequence becomes a one-element list; a list is used verbatim
    (its length is not clipped here).

    Raises:
        MutualExclusionConflict: both slots are populated.
    """
    _check_exclusive(config, "stop", "stop_single", "stop_list")
    if config.is_populated("stop_single"):
        return [config.stop_single]  # type: ignore[list-item]
    if config.is_populated("stop_list"):
        return list(config.stop_list or ())
    return None


def coerce_response_format_kind(value: Any) -> ResponseFormatKind:
    """Map a shorthand value (enum member or its name/value) to the enum.

    Raises:
        InvalidEnumValue: ``value`` is not a known shorthand.
    """
    if isinstance(value, ResponseFormatKind):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for kind in ResponseFormatKind:
            if key in (kind.value, kind.name.lower()):
                return kind
    raise InvalidEnumValue("response_format", value, (k.value for k in ResponseFormatKind))


def resolve_response_format(config: RequestConfiguration) -> Optional[ResponseFormat]:
    """Resolve ``response_format`` from the structured form or the shorthand.

    The shorthand is translated into the structured form (``JSON`` ->
    ``"json_object"``, ``TEXT`` -> ``"text"``). A structured value set directly
    passes through unchanged; a mapping with a ``type`` key or a bare type
    string is accepted in its place.

    Raises:
        MutualExclusionConflict: the shorthand is set while the structured
            form already carries a ``type``.
        InvalidEnumValue: the shorthand is not a known member.
    """
    structured_set = config.is_populated("response_format_object")
    if config.is_populated("response_format_enum"):
        if structured_set:
            raise MutualExclusionConflict(
                "response_format", ("response_format_object", "response_format_enum")
            )
        kind = coerce_response_format_kind(config.response_format_enum)
        return ResponseFormat(type=kind.wire_type)
    if not structured_set:
        return None
    value = config.response_format_object
    if isinstance(value, Mapping):
        return ResponseFormat(type=value.get("type"))
    if isinstance(value, str):
        return ResponseFormat(type=value)
    return value


def resolve_all(config: RequestConfiguration) -> ResolvedFields:
    """Resolve every alternate field pair, raising on the first failure."""
    return ResolvedFields(
        functions=resolve_functions(config),
        stop=resolve_stop(config),
        response_format=resolve_response_format(config),
    )


def try_resolve(resolver: Callable[[RequestConfiguration], Any], config: RequestConfiguration) -> Resolution:
    """Run ``resolver`` and capture a :class:`RequestError` instead of raising."""
    try:
        return Resolution(value=resolver(config))
    except RequestError as exc:
        return Resolution(error=exc)


__all__ = [
    "resolve_functions",
    "resolve_stop",
    "resolve_response_format",
    "coerce_response_format_kind",
    "resolve_all",
    "try_resolve",
]
