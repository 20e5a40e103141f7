"""Centroid helpers for rectangular bounding areas."""

from __future__ import annotations

from geomfit.errors import InvalidArgumentError
from geomfit.geometry.point import Number, Point
from geomfit.geometry.protocols import SupportsBounds


def _half(value: Number, integral: bool) -> Number:
    return value // 2 if integral else value / 2


def center(x: Number, y: Number, width: Number, height: Number) -> Point:
    """Return the center of the bounding area at ``(x, y)`` of the given size.

    When every argument is an ``int`` the halves use floor division and the
    point stays integral; otherwise true division is used.

    Args:
        x: Horizontal location of the bounding area
        y: Vertical location of the bounding area
        width: Width of the bounding area, zero or greater
        height: Height of the bounding area, zero or greater

    Returns:
        Point at the center of the bounding area

    Raises:
        InvalidArgumentError: If the width or height is negative
    """
    for name, value in (("width", width), ("height", height)):
        if not value >= 0:
            raise InvalidArgumentError(
                f"bounding area {name} must be non-negative, got {value}",
                argument=name,
                value=value,
            )
    integral = all(
        isinstance(v, int) and not isinstance(v, bool) for v in (x, y, width, height)
    )
    return Point(x=x + _half(width, integral), y=y + _half(height, integral))


def center_of(bounds: SupportsBounds) -> Point:
    """Return the center of anything exposing ``x``, ``y``, ``width`` and ``height``."""
    return center(bounds.x, bounds.y, bounds.width, bounds.height)
