"""JSON value kind detection."""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from .types import JSONKind, TypeMismatchError


def detect_kind(value: Any) -> JSONKind:
    """
    Detect the JSON kind of a decoded value.

    Args:
        value: Value produced by a JSON decoder

    Returns:
        JSONKind enum indicating the value kind

    Raises:
        TypeMismatchError: If value is not a decoded JSON value
    """
    if value is None:
        return JSONKind.NULL
    # bool is a subclass of int, so it has to be checked first
    elif isinstance(value, bool):
        return JSONKind.BOOLEAN
    elif isinstance(value, int):
        return JSONKind.INTEGER
    elif isinstance(value, (float, Decimal)):
        return JSONKind.NUMBER
    elif isinstance(value, str):
        return JSONKind.STRING
    elif isinstance(value, (list, tuple)):
        return JSONKind.ARRAY
    elif isinstance(value, Mapping):
        return JSONKind.OBJECT
    else:
        raise TypeMismatchError(
            f"Not a JSON value: {type(value).__name__}",
            context={"python_type": type(value).__name__}
        )


def require_kind(key: str, value: Any, *accepted: JSONKind) -> JSONKind:
    """
    Check that value has one of the accepted kinds.

    Args:
        key: Key the value was read from, for error reporting
        value: Decoded JSON value
        accepted: Kinds the caller can convert from

    Returns:
        The detected kind

    Raises:
        TypeMismatchError: If the kind is not accepted
    """
    kind = detect_kind(value)
    if kind not in accepted:
        expected = " or ".join(k.value for k in accepted)
        raise TypeMismatchError(
            f"Value at {key!r} is {kind.value}, expected {expected}",
            context={"key": key, "kind": kind, "expected": accepted}
        )
    return kind
