"""Basic definitions for all GeoJSON objects."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeAlias, TypeVar

from geojson_model.bbox import BoundingBox
from geojson_model.config import DEFAULT_CONFIG, GeoJsonConfig
from geojson_model.equality import geojson_equal, geojson_hash


__docformat__ = "google"
__all__ = (
    "GeoJsonType",
    "GeoJsonDict",
    "SpatialDict",
    "GeoJson",
)


GeoJsonDict: TypeAlias = dict[str, Any]
"""A dictionary representing a GeoJSON object."""


class GeoJsonType(Enum):
    """
    The nine values of the ``type`` member.

    The value of each member is its name in a GeoJSON document.

    References:
        - https://tools.ietf.org/html/rfc7946#section-1.4
    """

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"

    @property
    def is_geometry(self) -> bool:
        """``True`` for the seven geometry types."""
        return self not in (GeoJsonType.FEATURE, GeoJsonType.FEATURE_COLLECTION)

    def __str__(self) -> str:
        return self.value


@dataclass(kw_only=True, slots=True)
class SpatialDict:
    """
    Mapping of spatial objects with the ``__geo_interface__`` property.

    Objects of this class have the ``__geo_interface__`` property following a protocol
    [proposed](https://gist.github.com/sgillies/2217756) by Sean Gillies, which can make
    it easier to use spatial data in other Python software. An example of this is the ``shape()``
    function that builds Shapely geometries from any object with the ``__geo_interface__`` property.

    Attributes:
        __geo_interface__: this is the proposed property that contains the spatial data
    """

    __geo_interface__: dict


_G = TypeVar("_G", bound="GeoJson")


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class GeoJson(ABC):
    """
    Base class for all GeoJSON objects.

    Values of this class are immutable. Dimensionality and bounding boxes are checked
    once, when a value is constructed.

    This class, as well as ``Geometry``, is abstract: it can neither be instantiated,
    nor can a document be decoded into it with ``from_geojson()``. Use ``codec.decode()``
    to decode a document of any type.

    Attributes:
        type: the discriminator of this object's concrete type
        bbox: the optional bounding box of this object. Plain sequences are converted
              to ``BoundingBox``.
        is_three_dimensional: ``True`` if the positions of this object have elevations

    Raises:
        InvalidBoundingBoxLengthError: if the bounding box does not have 4 elements
                                       for a 2D object, or 6 elements for a 3D object
    """

    type: ClassVar[GeoJsonType]

    bbox: BoundingBox | None = None
    is_three_dimensional: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        self._normalize()
        object.__setattr__(self, "is_three_dimensional", self._derive_three_dimensional())

        bbox = BoundingBox.of(self.bbox)
        if bbox is not None:
            bbox.check_dimensions(self.is_three_dimensional)
        object.__setattr__(self, "bbox", bbox)

    @abstractmethod
    def _normalize(self) -> None:
        """Convert and check the members of the concrete type."""
        raise NotImplementedError

    @abstractmethod
    def _derive_three_dimensional(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _geojson_members(self) -> GeoJsonDict:
        """The members specific to the concrete type."""
        raise NotImplementedError

    @abstractmethod
    def _equality_members(self) -> tuple:
        """The values specific to the concrete type that decide equality."""
        raise NotImplementedError

    def _equality_key(self) -> tuple:
        return (self.type, self.bbox, *self._equality_members())

    @classmethod
    def from_geojson(
        cls: "type[_G]", doc: Any, *, config: GeoJsonConfig = DEFAULT_CONFIG
    ) -> "_G":
        """
        Decode a document into this concrete type.

        Args:
            doc: a GeoJSON object, as produced by ``json.loads()``
            config: decides how lenient decoding is

        Raises:
            AbstractConstructionError: if called on ``GeoJson`` or ``Geometry``
            DiscriminatorMismatchError: if ``doc`` is of another type
            GeoJsonError: if ``doc`` is not a valid GeoJSON object
        """
        from geojson_model.codec import decode_as

        return decode_as(cls, doc, config=config)

    @property
    def geojson(self) -> GeoJsonDict:
        """
        A mapping of this object, using the GeoJSON format.

        The ``type`` member comes first, followed by the members of the concrete type.
        The ``bbox`` member is only included if this object has a bounding box.
        """
        geojson: GeoJsonDict = {"type": self.type.value}
        geojson.update(self._geojson_members())
        if self.bbox is not None:
            geojson["bbox"] = list(self.bbox)
        return geojson

    @property
    def __geo_interface__(self) -> GeoJsonDict:
        """Same as ``geojson``."""
        return self.geojson

    @property
    def geo_interfaces(self) -> Iterator[SpatialDict]:
        """A mapping of this object to ``SpatialDict``s that implement ``__geo_interface__``."""
        geojson = self.geojson
        match geojson["type"]:
            case "FeatureCollection":
                for feature in geojson["features"]:
                    yield SpatialDict(__geo_interface__=feature)
            case _:
                yield SpatialDict(__geo_interface__=geojson)

    def __eq__(self, other: object) -> bool:
        return geojson_equal(self, other)

    def __hash__(self) -> int:
        return geojson_hash(self)
