"""
JSON Response - Typed access to parsed JSON objects.

Wraps one JSON object and converts the values stored under its keys to
strings, numbers, lists, ordered maps or any type pydantic can validate.
"""

from .json_response import JSONResponse
from .profiles import ConversionProfile, DEFAULT, PRETTY_PRINTING, STRICT
from .types import (
    JSONKind,
    JSONResponseError,
    ParseError,
    KeyNotFoundError,
    TypeMismatchError,
)

__version__ = "1.0.0"
__all__ = [
    "JSONResponse",
    "ConversionProfile",
    "DEFAULT",
    "PRETTY_PRINTING",
    "STRICT",
    "JSONKind",
    "JSONResponseError",
    "ParseError",
    "KeyNotFoundError",
    "TypeMismatchError",
]
