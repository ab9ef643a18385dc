"""Typed, read-only access to a parsed JSON object."""

import logging
from decimal import Decimal
from typing import Annotated, Any, Dict, Iterator, List, Mapping, Optional

from pydantic import Field

from . import profiles
from .data_type_detector import require_kind
from .profiles import ConversionProfile
from .types import (
    JSONKind,
    JSONResponseInterface,
    KeyNotFoundError,
    ParseError,
)

Int32 = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]
Int64 = Annotated[int, Field(ge=-2**63, le=2**63 - 1)]

_NUMERIC = tuple(kind for kind in JSONKind if kind.is_numeric)


class JSONResponse(JSONResponseInterface):
    """
    Represents a JSON object with typed accessors.

    Not limited to API responses: it works as a short alternative to
    indexing a decoded dict by hand, converting strings, numbers, lists,
    maps and arbitrary types through a ConversionProfile.

    The wrapped document is held by reference and must not be mutated
    while the response is in use. Accessors never mutate it, never log,
    and can be called concurrently.
    """

    def __init__(self, document: Mapping[str, Any],
                 profile: Optional[ConversionProfile] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize a response from an already parsed JSON object.

        Args:
            document: The JSON object. Held by reference, never copied
            profile: Conversion profile to bind (defaults to profiles.DEFAULT)
            logger: Optional logger instance

        Raises:
            ParseError: If document is not an object or not serializable
        """
        if not isinstance(document, Mapping):
            raise ParseError(
                f"Root element must be an object, got {type(document).__name__}",
                context={"location": "root"}
            )
        self._profile = profile or profiles.DEFAULT
        self._response = document
        self._response_text = self._profile.dumps(document)
        self.logger = logger or logging.getLogger(__name__)
        self.logger.debug(f"Built JSON response with {len(document)} keys "
                          f"using profile {self._profile.name!r}")

    @classmethod
    def from_document(cls, document: Mapping[str, Any],
                      profile: Optional[ConversionProfile] = None,
                      logger: Optional[logging.Logger] = None) -> "JSONResponse":
        """Initialize a response from an already parsed JSON object."""
        return cls(document, profile, logger)

    @classmethod
    def from_text(cls, text: str, profile: Optional[ConversionProfile] = None,
                  logger: Optional[logging.Logger] = None) -> "JSONResponse":
        """
        Parse JSON text and initialize a response from it.

        Args:
            text: The response text. Must be a JSON object
            profile: Conversion profile used to parse and convert
            logger: Optional logger instance

        Raises:
            ParseError: If text is malformed or not object-rooted
        """
        profile = profile or profiles.DEFAULT
        document = profile.loads(text)
        if not isinstance(document, dict):
            raise ParseError(
                f"Root element must be an object, got {type(document).__name__}",
                context={"location": "root"}
            )
        return cls(document, profile, logger)

    @property
    def profile(self) -> ConversionProfile:
        return self._profile

    def _lookup(self, key: str) -> Any:
        try:
            return self._response[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def _convert(self, key: str, value: Any, target_type: Any,
                 strict: Optional[bool] = None) -> Any:
        return self._profile.convert(value, target_type, strict=strict,
                                     location=f"value at {key!r}")

    def get(self, key: str, target_type: Any) -> Any:
        """
        Return the value at key converted to target_type.

        Args:
            key: Key to fetch from
            target_type: Type to convert to, e.g. ``int``, ``list[str]``,
                ``dict[str, float]``, a dataclass or a pydantic model

        Raises:
            KeyNotFoundError: If key is absent
            TypeMismatchError: If the value cannot be converted
        """
        return self._convert(key, self._lookup(key), target_type)

    def get_as(self, target_type: Any, profile: Optional[ConversionProfile] = None) -> Any:
        """
        Return the whole document converted to target_type.

        Args:
            target_type: Type to convert to
            profile: Profile to use for this call instead of the bound one

        Raises:
            TypeMismatchError: If the document cannot be converted
        """
        return (profile or self._profile).convert(self._response, target_type,
                                                  location="document")

    # Typed accessors. Each checks the JSON kind first so that no value is
    # stringified or parsed out of a string.

    def get_string(self, key: str) -> str:
        value = self._lookup(key)
        require_kind(key, value, JSONKind.STRING)
        return value

    def get_int(self, key: str) -> int:
        """Return an integral number in the signed 32-bit range."""
        value = self._lookup(key)
        require_kind(key, value, *_NUMERIC)
        return self._convert(key, value, Int32, strict=False)

    def get_long(self, key: str) -> int:
        """Return an integral number in the signed 64-bit range."""
        value = self._lookup(key)
        require_kind(key, value, *_NUMERIC)
        return self._convert(key, value, Int64, strict=False)

    def get_double(self, key: str) -> float:
        value = self._lookup(key)
        require_kind(key, value, *_NUMERIC)
        return self._convert(key, value, float, strict=False)

    def get_float(self, key: str) -> float:
        # Python has a single binary floating point type
        return self.get_double(key)

    def get_boolean(self, key: str) -> bool:
        value = self._lookup(key)
        require_kind(key, value, JSONKind.BOOLEAN)
        return value

    def get_decimal(self, key: str) -> Decimal:
        """Return a number with every digit of its source literal."""
        value = self._lookup(key)
        require_kind(key, value, *_NUMERIC)
        return self._convert(key, value, Decimal, strict=False)

    def get_list(self, key: str, element_type: Any = Any) -> List[Any]:
        """
        Return the array at key, converting each element to element_type.

        Element order and count match the source array.
        """
        value = self._lookup(key)
        require_kind(key, value, JSONKind.ARRAY)
        return self._convert(key, value, List[element_type])

    def get_map(self, key: str, key_type: Any = str,
                value_type: Any = Any) -> Dict[Any, Any]:
        """
        Return the object at key as a dict, keeping the source key order.

        Args:
            key: Key to fetch from
            key_type: Type to convert each member name to
            value_type: Type to convert each member value to
        """
        value = self._lookup(key)
        require_kind(key, value, JSONKind.OBJECT)
        return self._convert(key, value, Dict[key_type, value_type])

    def contains(self, key: str) -> bool:
        """Return whether key is a member, even if it maps to null."""
        return key in self._response

    def keys(self) -> List[str]:
        return list(self._response)

    def get_response_text(self) -> str:
        """Return the JSON text captured at construction."""
        return self._response_text

    def get_response(self) -> Mapping[str, Any]:
        """Return the wrapped document. Treat it as read-only."""
        return self._response

    def __contains__(self, key: object) -> bool:
        return key in self._response

    def __iter__(self) -> Iterator[str]:
        return iter(self._response)

    def __len__(self) -> int:
        return len(self._response)

    def __repr__(self) -> str:
        return f"JSONResponse({self._response_text!r}, profile={self._profile.name!r})"
