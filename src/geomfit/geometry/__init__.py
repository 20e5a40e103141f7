"""Geometry value types and helpers.

This package provides the Dimension, Point and Rectangle value types, the
aspect-ratio-preserving constrain operations, and centroid helpers.
"""

from geomfit.geometry.center import center, center_of
from geomfit.geometry.constrain import constrain, constrain_to
from geomfit.geometry.dimension import ZERO_DIMENSION, Dimension
from geomfit.geometry.point import Point, Rectangle
from geomfit.geometry.protocols import SupportsBounds, SupportsSize

__all__ = [
    "ZERO_DIMENSION",
    "Dimension",
    "Point",
    "Rectangle",
    "SupportsBounds",
    "SupportsSize",
    "center",
    "center_of",
    "constrain",
    "constrain_to",
]
