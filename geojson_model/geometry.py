"""Geometry objects."""

from abc import abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from geojson_model.error import DimensionMismatchError, InvalidValueError
from geojson_model.position import Position
from geojson_model.spatial import GeoJson, GeoJsonDict, GeoJsonType

import shapely.geometry
from shapely.geometry.base import BaseGeometry


__docformat__ = "google"
__all__ = (
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class Geometry(GeoJson):
    """
    Base class for the seven geometry types.

    Every position within one geometry has the same number of elements: a geometry
    is either two-dimensional, or three-dimensional, but never partially so.

    Geometries only represent shapes, and do not compute anything over them.
    Use ``to_shapely()`` for spatial analysis.

    Raises:
        DimensionMismatchError: if the positions of this geometry have different dimensions

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1
    """

    @abstractmethod
    def positions(self) -> Iterator[Position]:
        """Iterates over all positions of this geometry, in the order they appear."""
        raise NotImplementedError

    def to_shapely(self) -> BaseGeometry:
        """This geometry as a Shapely geometry."""
        return shapely.geometry.shape(self.geojson)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class _CoordinateGeometry(Geometry):
    """Base class for geometries with a ``coordinates`` member."""

    _depth: ClassVar[int]
    """Levels of nesting of positions in ``coordinates``."""

    coordinates: Any

    def _normalize(self) -> None:
        object.__setattr__(self, "coordinates", _read_coordinates(self.coordinates, self._depth))

    def _derive_three_dimensional(self) -> bool:
        first = next(self.positions(), None)
        return first is not None and first.is_three_dimensional

    def _geojson_members(self) -> GeoJsonDict:
        return {"coordinates": _write_coordinates(self.coordinates, self._depth)}

    def _equality_members(self) -> tuple:
        return (self.coordinates,)

    def positions(self) -> Iterator[Position]:
        return _flatten(self.coordinates, self._depth)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class Point(_CoordinateGeometry):
    """
    A single position.

    Attributes:
        coordinates: the position of this point

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.2
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.POINT
    _depth: ClassVar[int] = 0

    coordinates: Position


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class MultiPoint(_CoordinateGeometry):
    """
    An ordered sequence of positions.

    Attributes:
        coordinates: the positions of the points

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.3
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.MULTI_POINT
    _depth: ClassVar[int] = 1

    coordinates: tuple[Position, ...]

    def __iter__(self) -> Iterator[Point]:
        """Iterates over all positions as ``Point`` geometries."""
        for position in self.coordinates:
            yield Point(coordinates=position)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class LineString(_CoordinateGeometry):
    """
    A line through an ordered sequence of positions.

    RFC 7946 requires two or more positions, which is only checked in strict mode.

    Attributes:
        coordinates: the positions along the line

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.4
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.LINE_STRING
    _depth: ClassVar[int] = 1

    coordinates: tuple[Position, ...]

    @property
    def is_closed(self) -> bool:
        """``True`` if the first and last position are the same."""
        return len(self.coordinates) > 1 and self.coordinates[0] == self.coordinates[-1]


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class MultiLineString(_CoordinateGeometry):
    """
    An ordered sequence of lines.

    Attributes:
        coordinates: the positions of each line

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.5
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.MULTI_LINE_STRING
    _depth: ClassVar[int] = 2

    coordinates: tuple[tuple[Position, ...], ...]

    def __iter__(self) -> Iterator[LineString]:
        """Iterates over all lines as ``LineString`` geometries."""
        for line in self.coordinates:
            yield LineString(coordinates=line)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class Polygon(_CoordinateGeometry):
    """
    An area bounded by linear rings.

    The first ring is the exterior ring, and any others are holes.

    RFC 7946 requires each ring to be closed, and to have four or more positions.
    This is not enforced on construction, but checked in strict mode.

    Attributes:
        coordinates: the positions of each linear ring

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.6
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.POLYGON
    _depth: ClassVar[int] = 2

    coordinates: tuple[tuple[Position, ...], ...]

    @property
    def exterior(self) -> tuple[Position, ...] | None:
        """The exterior ring, or ``None`` if this polygon is empty."""
        return self.coordinates[0] if self.coordinates else None

    @property
    def holes(self) -> tuple[tuple[Position, ...], ...]:
        """The interior rings."""
        return self.coordinates[1:]


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class MultiPolygon(_CoordinateGeometry):
    """
    An ordered sequence of polygons.

    Attributes:
        coordinates: the rings of each polygon

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.7
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.MULTI_POLYGON
    _depth: ClassVar[int] = 3

    coordinates: tuple[tuple[tuple[Position, ...], ...], ...]

    def __iter__(self) -> Iterator[Polygon]:
        """Iterates over all polygons as ``Polygon`` geometries."""
        for rings in self.coordinates:
            yield Polygon(coordinates=rings)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class GeometryCollection(Geometry):
    """
    An ordered sequence of geometries of any type.

    A collection is three-dimensional if any of its geometries are.
    Nesting collections is allowed, but discouraged by RFC 7946.

    Attributes:
        geometries: the geometries in this collection

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.8
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.GEOMETRY_COLLECTION

    geometries: tuple[Geometry, ...]

    def _normalize(self) -> None:
        geometries = tuple(self.geometries)
        for i, geom in enumerate(geometries):
            if not isinstance(geom, Geometry):
                path = f"$.geometries[{i}]"
                raise InvalidValueError(path=path, expected="a geometry", value=geom)
        object.__setattr__(self, "geometries", geometries)

    def _derive_three_dimensional(self) -> bool:
        return any(geom.is_three_dimensional for geom in self.geometries)

    def _geojson_members(self) -> GeoJsonDict:
        return {"geometries": [geom.geojson for geom in self.geometries]}

    def _equality_members(self) -> tuple:
        return (self.geometries,)

    def positions(self) -> Iterator[Position]:
        for geom in self.geometries:
            yield from geom.positions()

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)


def _read_coordinates(value: Any, depth: int, path: str = "$.coordinates") -> Any:
    """
    Convert nested sequences of numbers to nested tuples of positions.

    Raises:
        DimensionMismatchError: if not all positions have the same number of elements
    """
    first_len: int | None = None

    def read(item: Any, level: int, item_path: str) -> Any:
        nonlocal first_len

        if level == 0:
            position = Position.of(item, item_path)
            if first_len is None:
                first_len = len(position)
            elif len(position) != first_len:
                msg = f"expected a position with {first_len} elements, but got {len(position)}"
                raise DimensionMismatchError(path=item_path, reason=msg)
            return position

        if isinstance(item, Position | str) or not isinstance(item, Sequence):
            msg = f"an array nested {level} level(s) deep"
            raise InvalidValueError(path=item_path, expected=msg, value=item)

        return tuple(read(nested, level - 1, f"{item_path}[{i}]") for i, nested in enumerate(item))

    return read(value, depth, path)


def _write_coordinates(coordinates: Any, depth: int) -> list:
    if depth == 0:
        return coordinates.to_list()
    return [_write_coordinates(nested, depth - 1) for nested in coordinates]


def _flatten(coordinates: Any, depth: int) -> Iterator[Position]:
    if depth == 0:
        yield coordinates
        return
    for nested in coordinates:
        yield from _flatten(nested, depth - 1)

