"""Conversion profiles: how text becomes a document and values become types."""

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any, List, Optional

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from .types import ParseError, TypeMismatchError


@lru_cache(maxsize=256)
def _cached_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def _type_adapter(target_type: Any) -> TypeAdapter:
    try:
        return _cached_adapter(target_type)
    except PydanticSchemaGenerationError:
        raise
    except TypeError:
        # unhashable type hints cannot be cached
        return TypeAdapter(target_type)


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", None) or repr(target_type)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not allowed by this profile")


@dataclass(frozen=True)
class ConversionProfile:
    """
    Shareable settings for parsing, serializing and converting JSON values.

    Text is parsed with the ``json`` module and serialized through it, value
    by value. Values are
    converted to target types with a pydantic ``TypeAdapter``.

    Attributes:
        name: Label used in logs and reprs
        strict: Use pydantic strict mode for generic conversions
        allow_nan: Accept and emit NaN and Infinity literals
        indent: Indentation for serialized text (None means compact)
        sort_keys: Sort object keys when serializing
        ensure_ascii: Escape non-ASCII characters when serializing
    """
    name: str = "default"
    strict: bool = False
    allow_nan: bool = False
    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False

    def replace(self, **changes: Any) -> "ConversionProfile":
        """Return a copy of this profile with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def loads(self, text: str) -> Any:
        """
        Parse JSON text into Python values.

        Number literals with a fraction or exponent become ``Decimal`` so
        their digits survive; integer literals become ``int``.

        Args:
            text: JSON text to parse

        Returns:
            The decoded value (any JSON kind)

        Raises:
            ParseError: If text is empty, not UTF-8 or not well-formed JSON
        """
        if isinstance(text, (bytes, bytearray)):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"JSON bytes are not valid UTF-8: {e}",
                                 context={"location": "input"}) from e
        if not text.strip():
            raise ParseError("JSON string is empty", context={"location": "input"})

        kwargs = {} if self.allow_nan else {"parse_constant": _reject_constant}
        try:
            return json.loads(text, parse_float=Decimal, **kwargs)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON syntax: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"line": e.lineno, "column": e.colno}
            ) from e
        except ValueError as e:
            raise ParseError(f"Invalid JSON value: {e}") from e

    def dumps(self, value: Any) -> str:
        """
        Serialize Python values into JSON text.

        Objects may be any Mapping, arrays any list or tuple. Decimals are
        written as number literals with all of their digits.

        Raises:
            ParseError: If value is not JSON serializable under this profile
        """
        try:
            return self._encode(value, 0)
        except (TypeError, ValueError, RecursionError) as e:
            raise ParseError(f"Data is not JSON serializable: {e}") from e

    def _encode(self, value: Any, depth: int) -> str:
        if value is None or isinstance(value, (bool, str, int, float)):
            return json.dumps(value, ensure_ascii=self.ensure_ascii,
                              allow_nan=self.allow_nan)
        elif isinstance(value, Decimal):
            return self._encode_decimal(value)
        elif isinstance(value, Mapping):
            items = list(value.items())
            if self.sort_keys:
                items.sort(key=lambda item: item[0])
            key_separator = ":" if self.indent is None else ": "
            members = [
                f"{self._encode_key(k)}{key_separator}{self._encode(v, depth + 1)}"
                for k, v in items
            ]
            return self._wrap("{", members, "}", depth)
        elif isinstance(value, (list, tuple)):
            elements = [self._encode(item, depth + 1) for item in value]
            return self._wrap("[", elements, "]", depth)
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    def _encode_key(self, key: Any) -> str:
        if not isinstance(key, str):
            raise TypeError(f"keys must be str, not {type(key).__name__}")
        return json.dumps(key, ensure_ascii=self.ensure_ascii)

    def _encode_decimal(self, value: Decimal) -> str:
        if value.is_finite():
            return str(value)
        if not self.allow_nan:
            raise ValueError("Out of range decimal values are not JSON compliant")
        if value.is_nan():
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"

    def _wrap(self, opening: str, parts: List[str], closing: str, depth: int) -> str:
        if not parts:
            return opening + closing
        if self.indent is None:
            return opening + ",".join(parts) + closing
        inner = "\n" + " " * (self.indent * (depth + 1))
        outer = "\n" + " " * (self.indent * depth)
        return opening + inner + ("," + inner).join(parts) + outer + closing

    def convert(self, value: Any, target_type: Any, strict: Optional[bool] = None,
                location: str = "value") -> Any:
        """
        Convert a decoded JSON value to an instance of target_type.

        Args:
            value: Decoded JSON value
            target_type: Any type pydantic can validate (builtins, typing
                generics, dataclasses, TypedDicts, models, enums, datetimes)
            strict: Override the profile's strict flag for this call
            location: Description of where value came from, for messages

        Returns:
            The converted value

        Raises:
            TypeMismatchError: If value cannot be converted
        """
        if strict is None:
            strict = self.strict
        try:
            adapter = _type_adapter(target_type)
        except PydanticSchemaGenerationError as e:
            raise TypeMismatchError(
                f"Unsupported target type {_type_name(target_type)}",
                context={"location": location, "target_type": target_type}
            ) from e

        try:
            # None defers to the target type's own configuration
            return adapter.validate_python(value, strict=True if strict else None)
        except ValidationError as e:
            details = "; ".join(err["msg"] for err in e.errors())
            raise TypeMismatchError(
                f"Cannot convert {location} to {_type_name(target_type)}: {details}",
                context={"location": location, "target_type": target_type,
                         "errors": e.errors()}
            ) from e


DEFAULT = ConversionProfile()
PRETTY_PRINTING = ConversionProfile(name="pretty", indent=4)
STRICT = ConversionProfile(name="strict", strict=True)
