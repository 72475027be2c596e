"""Configuration layer for request validation.

Sources are merged in a predictable order:
    1. Built-in defaults (``chat_params.config.defaults``)
    2. Optional JSON file passed as ``path``
    3. In-code ``overrides``

The JSON file holds a flat object with the policy fields, for example::

    {"fail_fast": true, "stop_limit": 4}

Public API
----------
* load_policy(path: str | Path | None = None, overrides: dict | None = None) -> ValidationPolicy
* default_policy() -> ValidationPolicy
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .policy import ValidationPolicy

_DEFAULT_POLICY = ValidationPolicy()


def default_policy() -> ValidationPolicy:
    """Return the shared default policy (immutable)."""
    return _DEFAULT_POLICY


def _load_file(path: Union[str, Path]) -> Dict[str, Any]:
    p = Path(path).expanduser()
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"policy file {p} must contain a JSON object")
    return data


def load_policy(
    path: Union[str, Path, None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ValidationPolicy:
    """Build a :class:`ValidationPolicy` from defaults, a file and overrides.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        ValueError: the file is not a JSON object.
        pydantic.ValidationError: a merged value has the wrong type or an
            unknown key is present.
    """
    merged: Dict[str, Any] = _DEFAULT_POLICY.model_dump()
    if path is not None:
        merged.update(_load_file(path))
    if overrides:
        merged.update(overrides)
    return ValidationPolicy.model_validate(merged)


__all__ = ["ValidationPolicy", "load_policy", "default_policy"]
