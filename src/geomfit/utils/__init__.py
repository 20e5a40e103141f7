"""Common utility functions for the geomfit package."""

from geomfit.utils.formatting import format_dimension, format_number, format_point
from geomfit.utils.image import fit_image, image_dimension

__all__ = [
    "fit_image",
    "format_dimension",
    "format_number",
    "format_point",
    "image_dimension",
]
