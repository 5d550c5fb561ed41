import json
from pathlib import Path
from typing import Any

from geojson_model import Feature, FeatureCollection, GeoJson, Geometry, GeometryCollection
from geojson_model.codec import decode, dumps, encode

import geojson
import shapely.geometry


DATA_DIR = Path(__file__).resolve().parent / "geojson_data"


def load_data(name: str) -> Any:
    with (DATA_DIR / name).open(encoding="utf-8") as file:
        return json.load(file)


def data_files() -> list[str]:
    return sorted(path.name for path in DATA_DIR.glob("*.json"))


def verify_geojson(obj: GeoJson) -> None:
    """Assert the invariants that every constructed object should uphold."""
    msg = repr(obj)

    assert isinstance(obj, GeoJson), msg

    doc = obj.geojson
    assert next(iter(doc)) == "type", msg
    assert doc["type"] == obj.type.value, msg
    assert ("bbox" in doc) == (obj.bbox is not None), msg
    assert obj.__geo_interface__ == doc, msg
    assert encode(obj) == doc, msg

    if obj.bbox is not None:
        assert len(obj.bbox) == (6 if obj.is_three_dimensional else 4), msg

    # round trip
    decoded = decode(doc)
    assert decoded == obj, msg
    assert hash(decoded) == hash(obj), msg
    assert decoded.geojson == doc, msg
    assert json.loads(dumps(obj)) == doc, msg

    assert geojson.loads(dumps(obj)), msg  # valid GeoJSON

    match obj:
        case FeatureCollection():
            for feature in obj:
                verify_geojson(feature)
        case Feature():
            assert isinstance(decoded, Feature), msg
            assert decoded.same_properties(obj), msg
            if obj.geometry is not None:
                verify_geojson(obj.geometry)
        case GeometryCollection():
            for geom in obj:
                verify_geojson(geom)
        case Geometry():
            verify_geometry(obj)
        case _:
            raise AssertionError(msg)

    assert str(obj), msg  # just test this doesn't raise
    assert repr(obj), msg  # just test this doesn't raise


def verify_geometry(geom: Geometry) -> None:
    msg = repr(geom)

    dims = {len(position) for position in geom.positions()}
    assert len(dims) <= 1, msg
    assert geom.is_three_dimensional == (dims == {3}), msg

    try:
        shp = shapely.geometry.shape(geom.__geo_interface__)
    except BaseException as err:
        raise AssertionError(f"{msg}: bad __geo_interface__: {err}")

    assert shp.has_z == geom.is_three_dimensional or shp.is_empty, msg
