"""
Immutable object model and JSON codec for GeoJSON (RFC 7946).

```python
from geojson_model import Feature, Point, codec

feature = codec.decode({
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
    "properties": {"name": "x"},
    "id": 7,
})
assert feature == Feature(geometry=Point(coordinates=(1.0, 2.0)), properties={"name": "x"}, id=7)
assert codec.encode(feature)["geometry"] == {"type": "Point", "coordinates": [1.0, 2.0]}
```

References:
    - https://tools.ietf.org/html/rfc7946
"""

import importlib.metadata


__version__: str = importlib.metadata.version("geojson-model")

# we add this to all modules for pdoc;
# see https://pdoc.dev/docs/pdoc.html#use-numpydoc-or-google-docstrings
__docformat__ = "google"

# we also use __all__ in all modules for pdoc; this lets us control the order
__all__ = (
    "__version__",
    "BoundingBox",
    "Feature",
    "FeatureCollection",
    "GeoJson",
    "GeoJsonConfig",
    "GeoJsonError",
    "GeoJsonType",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Position",
    "bbox",
    "codec",
    "config",
    "dynamic",
    "equality",
    "error",
    "feature",
    "geometry",
    "position",
    "shape",
    "spatial",
    "validation",
)

from .bbox import BoundingBox
from .config import GeoJsonConfig
from .error import GeoJsonError
from .feature import Feature, FeatureCollection
from .geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .position import Position
from .spatial import GeoJson, GeoJsonType
from . import codec, shape, validation  # noqa: E402
