"""
Decoding and encoding of GeoJSON documents.

Documents are generic JSON trees, as produced by ``json.loads()``: dicts, lists, strings,
numbers, booleans and ``None``. Tuples are accepted wherever lists are.

Decoding is top-down: the ``type`` member of an object decides which concrete type
it is decoded into, and nested geometries and features are decoded the same way.
Encoding is bottom-up: every object writes its own members, and is wrapped
with its ``type`` and optional ``bbox``.
"""

import json
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, TypeVar

from geojson_model.config import DEFAULT_CONFIG, GeoJsonConfig
from geojson_model.error import (
    AbstractConstructionError,
    DiscriminatorMismatchError,
    InvalidValueError,
    InvariantError,
    MalformedDocumentError,
    MissingFieldError,
    UnknownDiscriminatorError,
)
from geojson_model.feature import Feature, FeatureCollection
from geojson_model.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_model.spatial import GeoJson, GeoJsonDict, GeoJsonType
from geojson_model.validation import validate


__docformat__ = "google"
__all__ = (
    "decode",
    "decode_as",
    "encode",
    "loads",
    "dumps",
)


_G = TypeVar("_G", bound=GeoJson)

_COORDINATE_GEOMETRIES: dict[GeoJsonType, type[Geometry]] = {
    GeoJsonType.POINT: Point,
    GeoJsonType.MULTI_POINT: MultiPoint,
    GeoJsonType.LINE_STRING: LineString,
    GeoJsonType.MULTI_LINE_STRING: MultiLineString,
    GeoJsonType.POLYGON: Polygon,
    GeoJsonType.MULTI_POLYGON: MultiPolygon,
}

_KNOWN_MEMBERS: dict[GeoJsonType, set[str]] = {
    **{t: {"type", "bbox", "coordinates"} for t in _COORDINATE_GEOMETRIES},
    GeoJsonType.GEOMETRY_COLLECTION: {"type", "bbox", "geometries"},
    GeoJsonType.FEATURE: {"type", "bbox", "geometry", "properties", "id"},
    GeoJsonType.FEATURE_COLLECTION: {"type", "bbox", "features"},
}

_DISCRIMINATORS: dict[str, GeoJsonType] = {t.value: t for t in GeoJsonType}

_ANY_TYPE = "one of " + ", ".join(f"'{t.value}'" for t in GeoJsonType)
_ANY_GEOMETRY_TYPE = "one of " + ", ".join(f"'{t.value}'" for t in GeoJsonType if t.is_geometry)


def decode(doc: Any, *, config: GeoJsonConfig = DEFAULT_CONFIG) -> GeoJson:
    """
    Decode a document of any of the nine GeoJSON types.

    Args:
        doc: a GeoJSON object, as produced by ``json.loads()``
        config: decides how lenient decoding is

    Returns:
        a ``Geometry``, ``Feature``, or ``FeatureCollection``

    Raises:
        AbstractConstructionError: if the document has no ``type`` member
        UnknownDiscriminatorError: if the ``type`` member is not one of the nine GeoJSON types
        MissingFieldError: if a member required by the type is absent
        InvalidValueError: if a member has the wrong JSON kind
        InvariantError: if the decoded values break a rule of the object model
    """
    obj = _decode(doc, "$", config, expected=None)
    config.logger.debug(f"decoded {obj.type}")
    validate(obj, config=config)
    return obj


def decode_as(cls: type[_G], doc: Any, *, config: GeoJsonConfig = DEFAULT_CONFIG) -> _G:
    """
    Decode a document into the given concrete type.

    Args:
        cls: a concrete type, like ``Point`` or ``Feature``
        doc: a GeoJSON object, as produced by ``json.loads()``
        config: decides how lenient decoding is

    Raises:
        AbstractConstructionError: if ``cls`` is abstract, like ``Geometry`` or ``GeoJson``,
                                   or if the document has no ``type`` member
        DiscriminatorMismatchError: if the document is of another type
        GeoJsonError: for the same reasons as ``decode()``
    """
    if not isinstance(getattr(cls, "type", None), GeoJsonType):
        raise AbstractConstructionError(
            path="$",
            expected=f"a concrete type, {_ANY_TYPE}",
            target=cls.__name__,
        )

    obj = _decode(doc, "$", config, expected=cls.type)
    config.logger.debug(f"decoded {obj.type}")
    validate(obj, config=config)
    return obj  # type: ignore[return-value]


def encode(obj: GeoJson) -> GeoJsonDict:
    """
    Encode an object as a GeoJSON document.

    This is the same as ``obj.geojson``. Encoding cannot fail, since every object is
    checked on construction.

    Raises:
        TypeError: if ``obj`` is not a GeoJSON object
    """
    if not isinstance(obj, GeoJson):
        msg = f"expected a GeoJSON object, but got {type(obj).__name__}"
        raise TypeError(msg)
    return obj.geojson


def loads(text: str | bytes, *, config: GeoJsonConfig = DEFAULT_CONFIG) -> GeoJson:
    """
    Decode a GeoJSON string.

    Raises:
        json.JSONDecodeError: if ``text`` is not valid JSON
        GeoJsonError: for the same reasons as ``decode()``
    """
    return decode(json.loads(text), config=config)


def dumps(obj: GeoJson, **kwargs: Any) -> str:
    """
    Encode an object as a GeoJSON string.

    Keyword arguments are passed to ``json.dumps()``. ``NaN`` and infinite numbers
    are rejected unless ``allow_nan=True`` is passed, since they are not valid JSON.
    """
    kwargs.setdefault("allow_nan", False)
    return json.dumps(encode(obj), **kwargs)


def _decode(doc: Any, path: str, config: GeoJsonConfig, expected: GeoJsonType | None) -> Any:
    members = _object(doc, path)

    if "type" not in members:
        target = "GeoJson" if expected is None else expected.value
        raise AbstractConstructionError(path=path, expected="a 'type' member", target=target)

    discriminator = _discriminator(members["type"], f"{path}.type", _ANY_TYPE)

    if expected is not None and discriminator is not expected:
        raise DiscriminatorMismatchError(
            path=f"{path}.type",
            expected=f"type '{expected.value}'",
            value=members["type"],
        )

    foreign = members.keys() - _KNOWN_MEMBERS[discriminator]
    if foreign:
        config.logger.debug(f"ignore foreign members {sorted(foreign)} at {path}")

    bbox = _bbox(members, path)

    match discriminator:
        case GeoJsonType.GEOMETRY_COLLECTION:
            geometries = [
                _decode_geometry(geom, f"{path}.geometries[{i}]", config)
                for i, geom in enumerate(_array(members, "geometries", discriminator, path))
            ]
            return _construct(GeometryCollection, path, geometries=geometries, bbox=bbox)

        case GeoJsonType.FEATURE:
            return _decode_feature(members, path, config, bbox)

        case GeoJsonType.FEATURE_COLLECTION:
            features = [
                _decode(feature, f"{path}.features[{i}]", config, expected=GeoJsonType.FEATURE)
                for i, feature in enumerate(_array(members, "features", discriminator, path))
            ]
            return _construct(FeatureCollection, path, features=features, bbox=bbox)

        case _:
            cls = _COORDINATE_GEOMETRIES[discriminator]
            if "coordinates" not in members:
                raise MissingFieldError(
                    path=path,
                    expected="a 'coordinates' member",
                    field="coordinates",
                    discriminator=discriminator.value,
                )
            return _construct(cls, path, coordinates=members["coordinates"], bbox=bbox)


def _decode_geometry(doc: Any, path: str, config: GeoJsonConfig) -> Geometry:
    members = _object(doc, path)
    if "type" in members:
        discriminator = _discriminator(members["type"], f"{path}.type", _ANY_TYPE)
        if not discriminator.is_geometry:
            raise DiscriminatorMismatchError(
                path=f"{path}.type",
                expected=f"a geometry type, {_ANY_GEOMETRY_TYPE}",
                value=members["type"],
            )
    return _decode(members, path, config, expected=None)


def _decode_feature(
    members: Mapping[str, Any],
    path: str,
    config: GeoJsonConfig,
    bbox: list | None,
) -> Feature:
    for name in ("geometry", "properties"):
        if name in members:
            continue
        if config.strict:
            raise MissingFieldError(
                path=path,
                expected=f"a '{name}' member",
                field=name,
                discriminator=GeoJsonType.FEATURE.value,
            )
        config.logger.debug(f"treat absent '{name}' member at {path} as null")

    geometry = members.get("geometry")
    if geometry is not None:
        geometry = _decode_geometry(geometry, f"{path}.geometry", config)

    properties = members.get("properties")
    if properties is None and "properties" in members:
        config.logger.debug(f"treat null 'properties' member at {path} as empty")

    return _construct(
        Feature,
        path,
        geometry=geometry,
        properties=properties,
        id=members.get("id"),
        bbox=bbox,
    )


def _construct(cls: type[_G], path: str, **members: Any) -> _G:
    """Construct an object, reporting errors at their location in the document."""
    try:
        return cls(**members)
    except (MalformedDocumentError, InvariantError) as err:
        raise replace(err, path=path + err.path.removeprefix("$")) from err


def _object(doc: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(doc, Mapping):
        raise InvalidValueError(path=path, expected="a GeoJSON object", value=doc)
    return doc


def _discriminator(value: Any, path: str, expected: str) -> GeoJsonType:
    if isinstance(value, str) and value in _DISCRIMINATORS:
        return _DISCRIMINATORS[value]
    raise UnknownDiscriminatorError(path=path, expected=expected, value=value)


def _array(
    members: Mapping[str, Any],
    name: str,
    discriminator: GeoJsonType,
    path: str,
) -> Sequence[Any]:
    if name not in members:
        raise MissingFieldError(
            path=path,
            expected=f"a '{name}' member",
            field=name,
            discriminator=discriminator.value,
        )

    value = members[name]
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise InvalidValueError(path=f"{path}.{name}", expected="an array", value=value)
    return value


def _bbox(members: Mapping[str, Any], path: str) -> list[float] | None:
    value = members.get("bbox")
    if value is None:
        return None

    if isinstance(value, str) or not isinstance(value, Sequence):
        raise InvalidValueError(path=f"{path}.bbox", expected="an array of numbers", value=value)

    # elements are checked by BoundingBox
    return list(value)
