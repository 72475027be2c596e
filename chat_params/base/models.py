"""
Request domain models public surface.

This module re-exports the one-class-per-file implementations under
``chat_params.base.models_parts`` to keep imports stable.
"""

from .models_parts.message import Message, Role
from .models_parts.function_definition import FunctionDefinition
from .models_parts.response_format import ResponseFormat, ResponseFormatKind
from .models_parts.alternate_field_pair import AlternateFieldPair
from .models_parts.request_configuration import RequestConfiguration, FunctionCall

__all__ = [
    "Message",
    "Role",
    "FunctionDefinition",
    "ResponseFormat",
    "ResponseFormatKind",
    "AlternateFieldPair",
    "RequestConfiguration",
    "FunctionCall",
]
