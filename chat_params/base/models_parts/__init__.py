"""Request model parts (one class per module).

Prefer importing from :mod:`chat_params.base.models` for the stable surface.
"""

from .message import Message, Role
from .function_definition import FunctionDefinition
from .response_format import ResponseFormat, ResponseFormatKind
from .alternate_field_pair import AlternateFieldPair
from .request_configuration import RequestConfiguration, FunctionCall

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
