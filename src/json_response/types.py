"""Core type definitions for JSON Response."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Optional


class JSONKind(Enum):
    """Enumeration of JSON value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_numeric(self) -> bool:
        return self in (JSONKind.INTEGER, JSONKind.NUMBER)


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    KEY = "key"
    TYPE = "type"


class JSONResponseError(Exception):
    """Base exception for JSON response errors."""

    error_type = ErrorType.STRUCTURE

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message)
        self.context = context


class ParseError(JSONResponseError, ValueError):
    """Raised when text is not well-formed JSON or is not object-rooted."""

    error_type = ErrorType.SYNTAX


class KeyNotFoundError(JSONResponseError, LookupError):
    """Raised when a requested key is absent from the document."""

    error_type = ErrorType.KEY

    def __init__(self, key: str):
        super().__init__(f"Key not found: {key!r}", context={"key": key})
        self.key = key


class TypeMismatchError(JSONResponseError, TypeError):
    """Raised when a value cannot be converted to the requested type."""

    error_type = ErrorType.TYPE


# Abstract base classes for interfaces

class JSONResponseInterface(ABC):
    """Abstract interface for typed access to a JSON object."""

    @abstractmethod
    def get(self, key: str, target_type: Any) -> Any:
        """Convert the value at key to target_type."""
        pass

    @abstractmethod
    def get_as(self, target_type: Any, profile: Optional[Any] = None) -> Any:
        """Convert the whole document to target_type."""
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Return whether key is a member of the document."""
        pass

    @abstractmethod
    def get_response_text(self) -> str:
        """Return the text captured at construction."""
        pass

    @abstractmethod
    def get_response(self) -> Mapping[str, Any]:
        """Return the wrapped document."""
        pass
