from geojson_model import (
    Feature,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from geojson_model.codec import decode
from geojson_model.error import InvalidValueError
from geojson_model.shape import from_geo_interface, from_shapely, to_shapely

import pytest
import shapely
import shapely.geometry

from test.util import data_files, load_data, verify_geojson


GEOMETRY_FILES = [
    name for name in data_files() if not name.startswith(("feature", "unlocated_feature"))
]


@pytest.mark.xdist_group(name="fast")
@pytest.mark.parametrize("file_name", GEOMETRY_FILES)
def test_shapely_round_trip(file_name: str):
    geom = decode(load_data(file_name))
    shp = to_shapely(geom)
    assert shp.is_valid
    assert shp.geom_type == geom.type.value
    assert shp.has_z == geom.is_three_dimensional

    back = from_shapely(shp)
    verify_geojson(back)
    assert type(back) is type(geom)
    assert back.bbox is None
    assert list(back.positions()) == list(geom.positions())


@pytest.mark.xdist_group(name="fast")
def test_to_shapely():
    polygon = Polygon(
        coordinates=[
            [[0.0, 0.0], [4.0, 0.0], [4.0, 4.0], [0.0, 4.0], [0.0, 0.0]],
            [[1.0, 1.0], [2.0, 1.0], [2.0, 2.0], [1.0, 1.0]],
        ]
    )
    shp = polygon.to_shapely()
    assert isinstance(shp, shapely.geometry.Polygon)
    assert shp.area == 16.0 - 0.5
    assert len(shp.interiors) == 1
    assert shp.bounds == (0.0, 0.0, 4.0, 4.0)


@pytest.mark.xdist_group(name="fast")
def test_from_shapely():
    point = from_shapely(shapely.geometry.Point(1.0, 2.0, 3.0))
    assert point == Point(coordinates=(1.0, 2.0, 3.0))
    assert point.is_three_dimensional

    line = from_shapely(shapely.geometry.LineString([(0, 0), (1, 1)]))
    assert line == LineString(coordinates=[[0.0, 0.0], [1.0, 1.0]])

    box = from_shapely(shapely.box(0.0, 0.0, 1.0, 1.0))
    assert isinstance(box, Polygon)
    assert box.exterior is not None
    assert len(box.exterior) == 5
    assert box.exterior[0] == box.exterior[-1]

    multi = from_shapely(shapely.geometry.MultiPolygon([shapely.box(0, 0, 1, 1)] * 2))
    assert isinstance(multi, MultiPolygon)
    assert len(list(multi)) == 2


@pytest.mark.xdist_group(name="fast")
def test_from_shapely_linear_ring():
    ring = shapely.geometry.LinearRing([(0, 0), (1, 0), (1, 1)])
    line = from_shapely(ring)
    assert isinstance(line, LineString)
    assert line.is_closed
    assert line.coordinates[0] == Position(0.0, 0.0)


@pytest.mark.xdist_group(name="fast")
def test_from_shapely_collection():
    collection = shapely.geometry.GeometryCollection(
        [shapely.geometry.Point(0, 0), shapely.geometry.LineString([(0, 0), (1, 1)])]
    )
    geom = from_shapely(collection)
    assert isinstance(geom, GeometryCollection)
    assert [g.type.value for g in geom] == ["Point", "LineString"]
    verify_geojson(geom)


@pytest.mark.xdist_group(name="fast")
def test_from_geo_interface():
    feature = decode(load_data("feature.json"))
    assert from_geo_interface(feature) == feature
    assert from_geo_interface(feature.geojson) == feature

    class Thing:
        __geo_interface__ = {"type": "Point", "coordinates": (5.0, 6.0)}

    assert from_geo_interface(Thing()) == Point(coordinates=(5.0, 6.0))

    with pytest.raises(InvalidValueError, match="expected an object with __geo_interface__"):
        _ = from_geo_interface(42)


@pytest.mark.xdist_group(name="fast")
def test_shapely_shape_of_feature_geometry():
    feature = Feature(geometry=Point(coordinates=(1.0, 2.0)))
    assert feature.geometry is not None
    shp = shapely.geometry.shape(feature.geometry)
    assert (shp.x, shp.y) == (1.0, 2.0)
