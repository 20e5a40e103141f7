"""Immutable location and bounding-box value types."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, model_validator

from geomfit.geometry.dimension import Dimension

Number = Union[int, float]


class Point(BaseModel):
    """An immutable ``(x, y)`` location.

    Integer coordinates stay integers, so pixel positions computed from
    integer bounds are not silently turned into floats.
    """

    model_config = ConfigDict(frozen=True)

    x: Number
    y: Number

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Rectangle(BaseModel):
    """An immutable bounding box: a size anchored at its top-left corner."""

    model_config = ConfigDict(frozen=True)

    x: Number = 0
    y: Number = 0
    width: Number
    height: Number

    @model_validator(mode="after")
    def check_non_negative_size(self) -> Rectangle:
        if self.width < 0 or self.height < 0:
            raise ValueError("rectangle width and height cannot be negative")
        return self

    @property
    def size(self) -> Dimension:
        """The width and height of the box as a Dimension."""
        return Dimension.of(self.width, self.height)

    def center(self) -> Point:
        """Return the center of the box."""
        from geomfit.geometry.center import center_of

        return center_of(self)
