"""Image measurement utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from PIL import Image, UnidentifiedImageError

from geomfit.errors import ImageReadError
from geomfit.geometry import Dimension, constrain

logger: Final = logging.getLogger(__name__)


def image_dimension(image_path: Path) -> Dimension:
    """Read the pixel size of an image file.

    Only the header is decoded; pixel data is never loaded.

    Args:
        image_path: Path to the image

    Returns:
        Dimension of the image in pixels

    Raises:
        ImageReadError: If the file is missing or not a readable image
    """
    try:
        with Image.open(image_path) as img:
            dimension = Dimension.from_size(img)
    except (OSError, UnidentifiedImageError) as exc:
        raise ImageReadError(f"Unable to read image {image_path}: {exc}", exc) from exc
    logger.debug("Image %s is %sx%s", image_path, dimension.width, dimension.height)
    return dimension


def fit_image(
    image_path: Path, max_width: float, max_height: float
) -> tuple[Dimension, Dimension]:
    """Calculate the size an image would have when fitted into a bounding box.

    Args:
        image_path: Path to the image
        max_width: Maximum allowed width
        max_height: Maximum allowed height

    Returns:
        Tuple of (original, constrained) dimensions
    """
    original = image_dimension(image_path)
    return original, constrain(original, max_width, max_height)
