"""Feature objects."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, overload

from geojson_model.dynamic import DynamicValue, check_dynamic, check_id, dynamic_equal, kind_of
from geojson_model.error import InvalidValueError
from geojson_model.geometry import Geometry
from geojson_model.spatial import GeoJson, GeoJsonDict, GeoJsonType


__docformat__ = "google"
__all__ = (
    "Feature",
    "FeatureCollection",
)


_EMPTY_PROPERTIES: Mapping[str, DynamicValue] = MappingProxyType({})


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class Feature(GeoJson):
    """
    A spatially bounded thing.

    Features without a geometry are "unlocated" features, which is a valid state.
    A feature is three-dimensional if its geometry is.

    Features compare equal if their geometries, bounding boxes, and ids are equal,
    and their properties have the same keys in the same order. Property **values**
    are not compared: ``Feature(properties={"a": 1})`` is equal to
    ``Feature(properties={"a": 2})``. Use ``same_properties()`` to also compare values.

    Attributes:
        geometry: the geometry of this feature, or ``None`` if it is unlocated
        properties: a read-only mapping of JSON values. ``None`` is replaced by an empty mapping.
        id: a string or number that identifies this feature, or ``None``. A ``None`` id is
            omitted when encoding, so ``"id": null`` is not written back.

    Raises:
        InvalidIdTypeError: if ``id`` is not a string, a number, or ``None``
        InvalidValueError: if a property value has no JSON representation

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.2
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.FEATURE

    geometry: Geometry | None = None
    properties: Mapping[str, DynamicValue] | None = None
    id: str | int | float | None = None

    def _normalize(self) -> None:
        if self.geometry is not None and not isinstance(self.geometry, Geometry):
            path = "$.geometry"
            raise InvalidValueError(path=path, expected="a geometry or null", value=self.geometry)

        properties = self.properties
        if properties is None:
            properties = _EMPTY_PROPERTIES
        elif not isinstance(properties, Mapping):
            raise InvalidValueError(path="$.properties", expected="an object", value=properties)
        else:
            properties = MappingProxyType(dict(check_dynamic(properties, "$.properties")))
        object.__setattr__(self, "properties", properties)

        check_id(self.id)

    def _derive_three_dimensional(self) -> bool:
        return self.geometry is not None and self.geometry.is_three_dimensional

    def _geojson_members(self) -> GeoJsonDict:
        geojson: GeoJsonDict = {
            "geometry": self.geometry.geojson if self.geometry is not None else None,
            "properties": dict(self.properties),
        }
        if self.id is not None:
            geojson["id"] = self.id
        return geojson

    def _equality_members(self) -> tuple:
        return (
            self.geometry,
            tuple(self.properties.keys()),
            (kind_of(self.id), self.id),
        )

    def get_property(self, key: str, default: DynamicValue = None) -> DynamicValue:
        """
        Get the property value for the given key.

        Returns ``default`` if there is no ``key`` property.
        """
        return self.properties.get(key, default)

    def same_properties(self, other: "Feature") -> bool:
        """``True`` if both features have the same properties, comparing keys and values."""
        return dynamic_equal(self.properties, other.properties)


@dataclass(kw_only=True, slots=True, frozen=True, eq=False)
class FeatureCollection(GeoJson):
    """
    An ordered sequence of features.

    A collection is three-dimensional if any of its features are.

    Attributes:
        features: the features in this collection

    References:
        - https://tools.ietf.org/html/rfc7946#section-3.3
    """

    type: ClassVar[GeoJsonType] = GeoJsonType.FEATURE_COLLECTION

    features: tuple[Feature, ...] = ()

    def _normalize(self) -> None:
        features = tuple(self.features)
        for i, feature in enumerate(features):
            if not isinstance(feature, Feature):
                path = f"$.features[{i}]"
                raise InvalidValueError(path=path, expected="a feature", value=feature)
        object.__setattr__(self, "features", features)

    def _derive_three_dimensional(self) -> bool:
        return any(feature.is_three_dimensional for feature in self.features)

    def _geojson_members(self) -> GeoJsonDict:
        return {"features": [feature.geojson for feature in self.features]}

    def _equality_members(self) -> tuple:
        return (self.features,)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    @overload
    def __getitem__(self, index: int) -> Feature: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Feature, ...]: ...

    def __getitem__(self, index: int | slice) -> Feature | tuple[Feature, ...]:
        return self.features[index]
