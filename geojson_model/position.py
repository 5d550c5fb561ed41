"""Coordinate tuples."""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from geojson_model.error import DimensionMismatchError, InvalidValueError


__docformat__ = "google"
__all__ = (
    "Position",
    "PositionLike",
    "check_coordinate",
)


def check_coordinate(value: Any, path: str = "$") -> float:
    """
    Convert a coordinate or bounding box value to a float.

    Integers that are too large for a float are rejected like infinite numbers,
    since they cannot be represented in a position.

    Raises:
        InvalidValueError: if the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidValueError(path=path, expected="a number", value=value)

    try:
        number = float(value)
    except OverflowError:
        number = math.inf

    if not math.isfinite(number):
        raise InvalidValueError(path=path, expected="a finite number", value=value)

    return number


@dataclass(slots=True, frozen=True)
class Position:
    """
    A single coordinate tuple.

    The coordinate reference system for all GeoJSON coordinates is ``CRS:84``,
    which means every position is a tuple of longitude and latitude (in that order)
    on the WGS 84 ellipsoid, optionally followed by the height in meters above or below
    the ellipsoid. Projected coordinates are accepted as well, in which case longitude
    and latitude are easting and northing.

    Iterating over a position yields two or three floats, depending on whether
    ``elevation`` is set.

    Attributes:
        longitude: the x coordinate
        latitude: the y coordinate
        elevation: the z coordinate, or ``None`` for a two-dimensional position

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.1
        - https://tools.ietf.org/html/rfc7946#section-4
    """

    longitude: float
    latitude: float
    elevation: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "longitude", check_coordinate(self.longitude, "$[0]"))
        object.__setattr__(self, "latitude", check_coordinate(self.latitude, "$[1]"))
        if self.elevation is not None:
            object.__setattr__(self, "elevation", check_coordinate(self.elevation, "$[2]"))

    @classmethod
    def of(cls, value: "PositionLike", path: str = "$") -> "Position":
        """
        Build a position from a sequence of two or three numbers.

        Raises:
            InvalidValueError: if the value is not a sequence of finite numbers
            DimensionMismatchError: if the sequence does not have two or three elements
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise InvalidValueError(path=path, expected="an array of 2 or 3 numbers", value=value)
        numbers = [check_coordinate(number, f"{path}[{i}]") for i, number in enumerate(value)]
        if len(numbers) not in (2, 3):
            msg = f"a position must have 2 or 3 elements, but has {len(numbers)}"
            raise DimensionMismatchError(path=path, reason=msg)
        return cls(*numbers)

    @property
    def is_three_dimensional(self) -> bool:
        """``True`` if this position has an elevation."""
        return self.elevation is not None

    @property
    def x(self) -> float:
        return self.longitude

    @property
    def y(self) -> float:
        return self.latitude

    @property
    def z(self) -> float | None:
        return self.elevation

    def __iter__(self) -> Iterator[float]:
        yield self.longitude
        yield self.latitude
        if self.elevation is not None:
            yield self.elevation

    def __len__(self) -> int:
        return 2 if self.elevation is None else 3

    def to_list(self) -> list[float]:
        """This position as a JSON array."""
        return list(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple(self)!r}"


PositionLike: TypeAlias = Position | Sequence[float]
"""Anything that can be turned into a ``Position``."""
