"""geomfit - aspect-ratio-preserving dimension scaling and centroid helpers."""

__version__ = "0.1.0"

from .errors import GeometryError, ImageReadError, InvalidArgumentError
from .geometry import (
    ZERO_DIMENSION,
    Dimension,
    Point,
    Rectangle,
    center,
    center_of,
    constrain,
    constrain_to,
)

__all__ = [
    "ZERO_DIMENSION",
    "Dimension",
    "GeometryError",
    "ImageReadError",
    "InvalidArgumentError",
    "Point",
    "Rectangle",
    "center",
    "center_of",
    "constrain",
    "constrain_to",
]
