"""Bounding boxes."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from geojson_model.error import InvalidBoundingBoxLengthError
from geojson_model.position import check_coordinate


__docformat__ = "google"
__all__ = ("BoundingBox",)


@dataclass(slots=True, frozen=True)
class BoundingBox:
    """
    The axis-aligned extrema of a geometry, feature, or feature collection.

    A bounding box has 4 elements ``(min_x, min_y, max_x, max_y)``, or 6 elements
    ``(min_x, min_y, min_z, max_x, max_y, max_z)`` for three-dimensional objects.
    Bounding boxes compare element-wise, in order.

    Attributes:
        values: the extrema, in the order they appear in the ``bbox`` member

    Raises:
        InvalidValueError: if a value is not a finite number
        InvalidBoundingBoxLengthError: if there are not exactly 4 or 6 values

    References:
        - https://tools.ietf.org/html/rfc7946#section-5
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(check_coordinate(v, f"$.bbox[{i}]") for i, v in enumerate(self.values))
        if len(values) not in (4, 6):
            msg = f"bbox must have 4 or 6 elements, but has {len(values)}"
            raise InvalidBoundingBoxLengthError(path="$.bbox", reason=msg, length=len(values))
        object.__setattr__(self, "values", values)

    @classmethod
    def of(cls, values: "BoundingBox | Iterable[float] | None") -> "BoundingBox | None":
        """Wrap a sequence of numbers, passing through ``None`` and existing boxes."""
        if values is None or isinstance(values, BoundingBox):
            return values
        return cls(tuple(values))

    @property
    def is_three_dimensional(self) -> bool:
        """``True`` if this box has 6 elements."""
        return len(self.values) == 6

    @property
    def min_x(self) -> float:
        return self.values[0]

    @property
    def min_y(self) -> float:
        return self.values[1]

    @property
    def min_z(self) -> float | None:
        return self.values[2] if self.is_three_dimensional else None

    @property
    def max_x(self) -> float:
        return self.values[3] if self.is_three_dimensional else self.values[2]

    @property
    def max_y(self) -> float:
        return self.values[4] if self.is_three_dimensional else self.values[3]

    @property
    def max_z(self) -> float | None:
        return self.values[5] if self.is_three_dimensional else None

    def check_dimensions(self, is_three_dimensional: bool, path: str = "$.bbox") -> None:
        """
        Make sure this box fits an object of the given dimensionality.

        Raises:
            InvalidBoundingBoxLengthError: if the box has 6 elements for a 2D object,
                                           or 4 elements for a 3D object
        """
        if self.is_three_dimensional != is_three_dimensional:
            expected = 6 if is_three_dimensional else 4
            dims = "3D" if is_three_dimensional else "2D"
            msg = f"bbox of a {dims} object must have {expected} elements, but has {len(self)}"
            raise InvalidBoundingBoxLengthError(path=path, reason=msg, length=len(self))

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index: int | slice) -> float | tuple[float, ...]:
        return self.values[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.values!r}"
