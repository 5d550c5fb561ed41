"""
Error types.

```
                           (GeoJsonError)
                                 ╷
              ┌──────────────────┴──────────────────────┐
              ╵                                         ╵
   (MalformedDocumentError)                      (InvariantError)
              ╷                                         ╷
  ┌─────────┬─┴───────────┬──────────┐      ┌───────────┼────────────┬──────────────┐
  ╵         ╵             ╵          ╵      ╵           ╵            ╵              ╵
Missing  Abstract      Unknown     Invalid  Dimension   InvalidId    InvalidShape   Coordinate
Field    Construction  Discrimi-   Value    Mismatch    Type               ╷        Range
                       nator                InvalidBoundingBoxLength       ╵
                          ╷                                          RingNotClosed
                          ╵
                   DiscriminatorMismatch
```

Every error is raised synchronously while constructing or decoding a value.
None of them are recovered from internally.
"""

from dataclasses import dataclass
from typing import Any


__docformat__ = "google"
__all__ = (
    "GeoJsonError",
    "MalformedDocumentError",
    "MissingFieldError",
    "UnknownDiscriminatorError",
    "DiscriminatorMismatchError",
    "AbstractConstructionError",
    "InvalidValueError",
    "InvariantError",
    "DimensionMismatchError",
    "InvalidBoundingBoxLengthError",
    "InvalidIdTypeError",
    "InvalidShapeError",
    "RingNotClosedError",
    "CoordinateRangeError",
)


class GeoJsonError(ValueError):
    """Base exception for GeoJSON values that cannot be constructed or decoded."""


@dataclass(kw_only=True)
class MalformedDocumentError(GeoJsonError):
    """
    Base exception for documents that do not have the shape of a GeoJSON object.

    Attributes:
        path: JSON path of the offending member, f.e. ``$.features[0].geometry``
        expected: describes what was expected at ``path``
    """

    path: str
    expected: str

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}"


@dataclass(kw_only=True)
class MissingFieldError(MalformedDocumentError):
    """
    A member required for the given discriminator is absent.

    Attributes:
        field: name of the missing member
        discriminator: the ``type`` of the object that lacks ``field``
    """

    field: str
    discriminator: str

    def __str__(self) -> str:
        return f"{self.path}: '{self.discriminator}' is missing the '{self.field}' member"


@dataclass(kw_only=True)
class UnknownDiscriminatorError(MalformedDocumentError):
    """
    The ``type`` member is not one of the nine GeoJSON types.

    Attributes:
        value: the unrecognized ``type`` value
    """

    value: Any

    def __str__(self) -> str:
        return f"{self.path}: unknown GeoJSON type {self.value!r}, expected {self.expected}"


@dataclass(kw_only=True)
class DiscriminatorMismatchError(UnknownDiscriminatorError):
    """A document was decoded as one concrete type, but its ``type`` names another."""

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}, but found type {self.value!r}"


@dataclass(kw_only=True)
class AbstractConstructionError(MalformedDocumentError):
    """
    A document cannot be resolved to a concrete type.

    This is raised when the ``type`` member is missing, or when decoding
    directly into an abstract type like ``Geometry`` or ``GeoJson``.

    Attributes:
        target: name of the type that was requested
    """

    target: str

    def __str__(self) -> str:
        return f"{self.path}: cannot construct {self.target}, expected {self.expected}"


@dataclass(kw_only=True)
class InvalidValueError(MalformedDocumentError):
    """
    A member has the wrong JSON kind, f.e. a string where a number was expected.

    Attributes:
        value: the offending value
    """

    value: Any

    def __str__(self) -> str:
        return f"{self.path}: expected {self.expected}, but got {self.value!r}"


@dataclass(kw_only=True)
class InvariantError(GeoJsonError):
    """
    Base exception for values that break a structural rule of the object model.

    Attributes:
        path: JSON path of the offending member, or ``$`` for the value itself
        reason: describes the broken rule
    """

    path: str = "$"
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


@dataclass(kw_only=True)
class DimensionMismatchError(InvariantError):
    """Positions within one geometry disagree in their number of elements."""


@dataclass(kw_only=True)
class InvalidBoundingBoxLengthError(InvariantError):
    """
    A bounding box does not have 4 or 6 elements, or its length does not
    match the dimensionality of the object it belongs to.

    Attributes:
        length: the number of elements of the bounding box
    """

    length: int


@dataclass(kw_only=True)
class InvalidIdTypeError(InvariantError):
    """
    A Feature ``id`` is neither a string, nor a number, nor ``None``.

    Attributes:
        value: the rejected ``id``
    """

    value: Any


@dataclass(kw_only=True)
class InvalidShapeError(InvariantError):
    """A geometry does not have enough positions for its type (checked in strict mode)."""


@dataclass(kw_only=True)
class RingNotClosedError(InvalidShapeError):
    """A linear ring's first and last position differ (checked in strict mode)."""


@dataclass(kw_only=True)
class CoordinateRangeError(InvariantError):
    """A longitude or latitude is out of range (checked if configured)."""
