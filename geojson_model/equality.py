"""
Equality and hashing of GeoJSON objects.

Two objects are equal if they are of the same concrete type, and every member compares
equal by the rule for its kind:
 - coordinates, bounding boxes and nested objects compare element-wise, in order
 - Feature properties only compare by their keys, in order, and **not** by their values
 - Feature ids compare by value, but only if they are of the same JSON kind

Hashes fold the same members, in the same order, so that equal objects have equal hashes.
"""

from collections.abc import Iterable, Mapping
from typing import Any


__docformat__ = "google"
__all__ = (
    "structural_hash",
    "geojson_equal",
    "geojson_hash",
)


def structural_hash(fields: Iterable[Any]) -> int:
    """
    Fold an ordered sequence of values into a single hash.

    Lists and dicts are hashed by their contents, in order.
    """
    return hash(tuple(_freeze(value) for value in fields))


def _freeze(value: Any) -> Any:
    match value:
        case list() | tuple():
            return tuple(_freeze(item) for item in value)
        case Mapping():
            return tuple((k, _freeze(v)) for k, v in value.items())
        case _:
            return value


def geojson_equal(left: Any, right: Any) -> bool:
    """``True`` if both objects are of the same concrete type, and all members are equal."""
    if left is right:
        return True

    if type(left) is not type(right) or not hasattr(left, "_equality_key"):
        return False

    return left._equality_key() == right._equality_key()


def geojson_hash(obj: Any) -> int:
    """A hash of the same members that ``geojson_equal()`` compares."""
    return structural_hash(obj._equality_key())
