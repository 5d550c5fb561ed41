import re

from geojson_model import GeoJsonError
from geojson_model.codec import decode
from geojson_model.error import (
    AbstractConstructionError,
    CoordinateRangeError,
    DimensionMismatchError,
    DiscriminatorMismatchError,
    InvalidBoundingBoxLengthError,
    InvalidIdTypeError,
    InvalidShapeError,
    InvalidValueError,
    InvariantError,
    MalformedDocumentError,
    MissingFieldError,
    RingNotClosedError,
    UnknownDiscriminatorError,
)

import pytest


@pytest.mark.xdist_group(name="fast")
@pytest.mark.parametrize(
    ("cls", "bases"),
    [
        (MissingFieldError, [MalformedDocumentError]),
        (UnknownDiscriminatorError, [MalformedDocumentError]),
        (DiscriminatorMismatchError, [UnknownDiscriminatorError, MalformedDocumentError]),
        (AbstractConstructionError, [MalformedDocumentError]),
        (InvalidValueError, [MalformedDocumentError]),
        (DimensionMismatchError, [InvariantError]),
        (InvalidBoundingBoxLengthError, [InvariantError]),
        (InvalidIdTypeError, [InvariantError]),
        (InvalidShapeError, [InvariantError]),
        (RingNotClosedError, [InvalidShapeError, InvariantError]),
        (CoordinateRangeError, [InvariantError]),
    ],
)
def test_hierarchy(cls, bases):
    for base in [*bases, GeoJsonError, ValueError]:
        assert issubclass(cls, base)


@pytest.mark.xdist_group(name="fast")
def test_document_and_invariant_errors_are_disjoint():
    assert not issubclass(MalformedDocumentError, InvariantError)
    assert not issubclass(InvariantError, MalformedDocumentError)
    assert not issubclass(AbstractConstructionError, MissingFieldError)


@pytest.mark.xdist_group(name="fast")
def test_messages():
    err = MissingFieldError(
        path="$.features[0]",
        expected="a 'geometry' member",
        field="geometry",
        discriminator="Feature",
    )
    assert str(err) == "$.features[0]: 'Feature' is missing the 'geometry' member"

    err = UnknownDiscriminatorError(path="$.type", expected="'Point'", value="Pt")
    assert str(err) == "$.type: unknown GeoJSON type 'Pt', expected 'Point'"

    err = DiscriminatorMismatchError(path="$.type", expected="type 'Point'", value="LineString")
    assert str(err) == "$.type: expected type 'Point', but found type 'LineString'"

    err = AbstractConstructionError(path="$", expected="a 'type' member", target="Geometry")
    assert str(err) == "$: cannot construct Geometry, expected a 'type' member"

    err = InvalidValueError(path="$.coordinates[1]", expected="a number", value="2")
    assert str(err) == "$.coordinates[1]: expected a number, but got '2'"

    err = DimensionMismatchError(reason="positions differ")
    assert err.path == "$"
    assert str(err) == "$: positions differ"


@pytest.mark.xdist_group(name="fast")
def test_errors_carry_paths():
    doc = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": None, "properties": {}},
            {"type": "Feature", "geometry": None, "properties": {}, "id": False},
        ],
    }
    with pytest.raises(InvalidIdTypeError, match=re.escape("$.features[1].id: ")) as err:
        _ = decode(doc)
    assert err.value.value is False
    assert isinstance(err.value.__cause__, InvalidIdTypeError)
    assert err.value.__cause__.path == "$.id"


@pytest.mark.xdist_group(name="fast")
def test_catch_all():
    for doc in [
        None,
        {"type": "Nope"},
        {"type": "Point"},
        {"type": "Point", "coordinates": [0.0, 0.0, 0.0, 0.0]},
        {"type": "Feature", "id": {}},
    ]:
        with pytest.raises(GeoJsonError):
            _ = decode(doc)

        with pytest.raises(ValueError):
            _ = decode(doc)
