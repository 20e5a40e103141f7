"""Text and number formatting utilities."""

from __future__ import annotations

from geomfit.geometry import Dimension, Point


def format_number(value: float, precision: int = 3) -> str:
    """Format a number rounded to *precision* places without trailing zeros.

    Args:
        value: Value to format
        precision: Maximum number of decimal places

    Returns:
        Formatted number string, e.g. ``266.667`` or ``400``
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_dimension(dimension: Dimension, precision: int = 3) -> str:
    """Format a dimension as ``WIDTH x HEIGHT``."""
    return f"{format_number(dimension.width, precision)} x {format_number(dimension.height, precision)}"


def format_point(point: Point, precision: int = 3) -> str:
    """Format a point as ``(X, Y)``."""
    return f"({format_number(point.x, precision)}, {format_number(point.y, precision)})"
