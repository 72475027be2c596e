"""
Request capability interfaces (Protocols).

Re-exports Protocols split into single-class modules under
``chat_params.base.interfaces_parts`` to keep imports stable.
"""

from __future__ import annotations

from .interfaces_parts import HasModel, HasTemperature, HasUser, SupportsValidation

__all__ = [
    "HasModel",
    "HasTemperature",
    "HasUser",
    "SupportsValidation",
]
