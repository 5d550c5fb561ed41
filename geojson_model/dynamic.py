"""
Dynamically typed JSON values.

Feature ids and property values can hold any JSON value, so their kind is only known
once a document is read. They are kept as the plain Python values the ``json`` module
produces, and classified with ``kind_of()`` wherever the kind matters.
"""

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeAlias

from geojson_model.error import InvalidIdTypeError, InvalidValueError


__docformat__ = "google"
__all__ = (
    "DynamicValue",
    "DynamicKind",
    "kind_of",
    "check_dynamic",
    "check_id",
    "dynamic_equal",
)


DynamicValue: TypeAlias = (
    str | int | float | bool | None | Sequence["DynamicValue"] | Mapping[str, "DynamicValue"]
)
"""A JSON value whose kind is resolved at read time."""


class DynamicKind(Enum):
    """The six kinds of JSON values."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


_ID_KINDS = {DynamicKind.STRING, DynamicKind.NUMBER, DynamicKind.NULL}


def kind_of(value: Any, path: str = "$") -> DynamicKind:
    """
    Classify a value as one of the JSON kinds.

    ``bool`` is a subclass of ``int`` in Python, but is never considered a number here.
    Tuples are accepted as arrays, since ``shapely`` and other ``__geo_interface__``
    implementations produce them.

    Raises:
        InvalidValueError: if the value has no JSON representation
    """
    match value:
        case None:
            return DynamicKind.NULL
        case bool():
            return DynamicKind.BOOLEAN
        case int() | float():
            return DynamicKind.NUMBER
        case str():
            return DynamicKind.STRING
        case list() | tuple():
            return DynamicKind.ARRAY
        case Mapping():
            return DynamicKind.OBJECT
        case _:
            raise InvalidValueError(path=path, expected="a JSON value", value=value)


def check_dynamic(value: Any, path: str = "$") -> DynamicValue:
    """
    Make sure that a value is a tree of JSON values, and return it.

    Raises:
        InvalidValueError: if the tree contains a value with no JSON representation,
                           or an object with a key that is not a string
    """
    match kind_of(value, path):
        case DynamicKind.ARRAY:
            for i, item in enumerate(value):
                check_dynamic(item, f"{path}[{i}]")
        case DynamicKind.OBJECT:
            for key, item in value.items():
                if not isinstance(key, str):
                    raise InvalidValueError(path=path, expected="string keys", value=key)
                check_dynamic(item, f"{path}.{key}")
        case DynamicKind.NUMBER if not _is_finite(value):
            raise InvalidValueError(path=path, expected="a finite number", value=value)
        case _:
            pass
    return value


def check_id(value: Any, path: str = "$.id") -> str | int | float | None:
    """
    Make sure that a value can be used as a Feature ``id``, and return it.

    Raises:
        InvalidIdTypeError: if the value is not a string, a finite number, or ``None``

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.2
    """
    try:
        kind = kind_of(value, path)
    except InvalidValueError:
        kind = None

    if kind not in _ID_KINDS or (kind is DynamicKind.NUMBER and not _is_finite(value)):
        msg = f"expected a string or number as id, but got {value!r}"
        raise InvalidIdTypeError(path=path, reason=msg, value=value)

    return value


def _is_finite(number: int | float) -> bool:
    # integers of any size are valid JSON numbers, but do not fit into a float
    return not isinstance(number, float) or math.isfinite(number)


def dynamic_equal(left: DynamicValue, right: DynamicValue) -> bool:
    """
    Compare two values only if they are of the same kind.

    A string ``"7"`` is never equal to the number ``7``, and ``True`` is never equal to ``1``.
    Numbers compare by value, so ``7`` and ``7.0`` are equal.
    """
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is not right_kind:
        return False

    match left_kind:
        case DynamicKind.ARRAY:
            return len(left) == len(right) and all(
                dynamic_equal(a, b) for a, b in zip(left, right, strict=True)
            )
        case DynamicKind.OBJECT:
            return list(left.keys()) == list(right.keys()) and all(
                dynamic_equal(left[k], right[k]) for k in left
            )
        case _:
            return left == right
