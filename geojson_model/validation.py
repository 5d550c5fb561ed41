"""
Optional checks of RFC 7946 rules.

Construction of GeoJSON objects only enforces the rules of the object model:
uniform dimensions and well-formed bounding boxes. The checks in this module are
enabled by ``GeoJsonConfig``, and run after decoding a document. They can also be
run on objects constructed in code, using ``validate()``.
"""

from collections.abc import Iterator
from typing import Any

from geojson_model.config import DEFAULT_CONFIG, GeoJsonConfig
from geojson_model.error import CoordinateRangeError, InvalidShapeError, RingNotClosedError
from geojson_model.feature import Feature, FeatureCollection
from geojson_model.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPolygon,
    Polygon,
)
from geojson_model.position import Position
from geojson_model.spatial import GeoJson


__docformat__ = "google"
__all__ = ("validate",)


def validate(obj: GeoJson, *, config: GeoJsonConfig = DEFAULT_CONFIG, path: str = "$") -> None:
    """
    Check an object and everything it contains against the configured rules.

    Args:
        obj: any GeoJSON object
        config: decides which rules are checked
        path: JSON path of ``obj``, used in error messages

    Raises:
        InvalidShapeError: in strict mode, if a LineString has less than two positions,
                           or a linear ring has less than four positions
        RingNotClosedError: in strict mode, if a linear ring is not closed
        CoordinateRangeError: if coordinate ranges are validated, and a longitude is
                              not within ``[-180, 180]``, or a latitude not within ``[-90, 90]``

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.1.4
        - https://tools.ietf.org/html/rfc7946#section-3.1.6
    """
    match obj:
        case FeatureCollection():
            for i, feature in enumerate(obj.features):
                validate(feature, config=config, path=f"{path}.features[{i}]")
            return
        case Feature():
            if obj.geometry is not None:
                validate(obj.geometry, config=config, path=f"{path}.geometry")
            return
        case GeometryCollection():
            for i, geom in enumerate(obj.geometries):
                validate(geom, config=config, path=f"{path}.geometries[{i}]")
            return
        case _:
            pass

    coords_path = f"{path}.coordinates"

    if config.strict:
        match obj:
            case LineString():
                _check_line(obj.coordinates, coords_path)
            case MultiLineString():
                for i, line in enumerate(obj.coordinates):
                    _check_line(line, f"{coords_path}[{i}]")
            case Polygon():
                _check_rings(obj.coordinates, coords_path)
            case MultiPolygon():
                for i, rings in enumerate(obj.coordinates):
                    _check_rings(rings, f"{coords_path}[{i}]")
            case _:
                pass

    if config.validate_coordinate_ranges:
        for pos_path, position in _positions(obj.coordinates, obj._depth, coords_path):
            _check_range(position, pos_path)


def _check_line(line: tuple[Position, ...], path: str) -> None:
    if len(line) < 2:
        msg = f"a line must have at least 2 positions, but has {len(line)}"
        raise InvalidShapeError(path=path, reason=msg)


def _check_rings(rings: tuple[tuple[Position, ...], ...], path: str) -> None:
    for i, ring in enumerate(rings):
        ring_path = f"{path}[{i}]"
        if len(ring) < 4:
            msg = f"a linear ring must have at least 4 positions, but has {len(ring)}"
            raise InvalidShapeError(path=ring_path, reason=msg)
        if ring[0] != ring[-1]:
            msg = f"a linear ring must be closed, but starts at {ring[0]} and ends at {ring[-1]}"
            raise RingNotClosedError(path=ring_path, reason=msg)


def _check_range(position: Position, path: str) -> None:
    if not -180.0 <= position.longitude <= 180.0:
        msg = f"longitude {position.longitude} is not within [-180, 180]"
        raise CoordinateRangeError(path=f"{path}[0]", reason=msg)
    if not -90.0 <= position.latitude <= 90.0:
        msg = f"latitude {position.latitude} is not within [-90, 90]"
        raise CoordinateRangeError(path=f"{path}[1]", reason=msg)


def _positions(coordinates: Any, depth: int, path: str) -> Iterator[tuple[str, Position]]:
    if depth == 0:
        yield path, coordinates
        return
    for i, nested in enumerate(coordinates):
        yield from _positions(nested, depth - 1, f"{path}[{i}]")
