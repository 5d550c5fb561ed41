"""Conversion between GeoJSON objects, Shapely geometries, and the ``__geo_interface__``."""

from collections.abc import Mapping
from typing import Any

from geojson_model.codec import decode
from geojson_model.config import DEFAULT_CONFIG, GeoJsonConfig
from geojson_model.error import InvalidValueError
from geojson_model.geometry import Geometry
from geojson_model.spatial import GeoJson, GeoJsonDict

import shapely.geometry
from shapely.geometry.base import BaseGeometry


__docformat__ = "google"
__all__ = (
    "to_shapely",
    "from_shapely",
    "from_geo_interface",
)


def to_shapely(geom: Geometry) -> BaseGeometry:
    """
    Convert a geometry to a Shapely geometry.

    Bounding boxes are not carried over, since Shapely computes them with ``bounds``.
    """
    return geom.to_shapely()


def from_shapely(geom: BaseGeometry, *, config: GeoJsonConfig = DEFAULT_CONFIG) -> Geometry:
    """
    Convert a Shapely geometry to a geometry.

    A ``LinearRing`` is converted to a ``LineString``, since the former does not exist in GeoJSON.

    Raises:
        GeoJsonError: if the geometry is empty, or has more than three dimensions
    """
    obj = from_geo_interface(shapely.geometry.mapping(geom), config=config)
    if not isinstance(obj, Geometry):
        raise AssertionError
    return obj


def from_geo_interface(obj: Any, *, config: GeoJsonConfig = DEFAULT_CONFIG) -> GeoJson:
    """
    Decode any object that implements the ``__geo_interface__`` protocol.

    Mappings are decoded as they are.

    Raises:
        InvalidValueError: if the object has no ``__geo_interface__`` property
        GeoJsonError: if the mapping is not a valid GeoJSON object

    References:
        - https://gist.github.com/sgillies/2217756
    """
    if isinstance(obj, Mapping):
        mapping: GeoJsonDict = dict(obj)
    elif hasattr(obj, "__geo_interface__"):
        mapping = dict(obj.__geo_interface__)
    else:
        raise InvalidValueError(path="$", expected="an object with __geo_interface__", value=obj)

    # This geometry does not exist in GeoJSON.
    if mapping.get("type") == "LinearRing":
        mapping["type"] = "LineString"

    return decode(mapping, config=config)
