"""Aspect-ratio-preserving fit of a dimension inside a bounding box.

The constrain operation scales an inner size down until it fits within an
outer width and height, keeping the inner width/height ratio:

- A zero bound on either axis collapses the result to ``ZERO_DIMENSION``
- An inner size that already fits is returned unchanged
- Otherwise whichever side reaches its bound first (the binding constraint)
  is set to that bound and the other side is derived from the ratio

The functions are pure and keep no state between calls.
"""

from __future__ import annotations

import logging
import math
from typing import Final

from geomfit.errors import InvalidArgumentError
from geomfit.geometry.dimension import ZERO_DIMENSION, Dimension
from geomfit.geometry.protocols import SupportsSize

logger: Final = logging.getLogger(__name__)


def _check_inner(width: float, height: float) -> None:
    # NaN fails both comparisons
    if not (width > 0 and height > 0) or not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidArgumentError.non_positive_dimension(width, height)


def _check_bound(name: str, value: float) -> None:
    if not value >= 0:
        raise InvalidArgumentError.negative_bound(name, value)


def constrain(inner: SupportsSize, max_width: float, max_height: float) -> Dimension:
    """Return the largest size with the ratio of *inner* that fits the bounds.

    The result is never larger than *inner*: a size that already fits is
    returned unchanged, as the same object when *inner* is a ``Dimension``.
    ``math.inf`` may be passed to leave an axis unbounded.

    Args:
        inner: Size to constrain; both sides must be positive and finite
        max_width: Maximum width, zero or greater
        max_height: Maximum height, zero or greater

    Returns:
        The constrained Dimension

    Raises:
        InvalidArgumentError: If *inner* has a non-positive side or a bound
            is negative
    """
    width = inner.width
    height = inner.height
    _check_inner(width, height)
    _check_bound("max_width", max_width)
    _check_bound("max_height", max_height)

    if max_width == 0 or max_height == 0:
        logger.debug("Zero bound %sx%s collapses %sx%s", max_width, max_height, width, height)
        return ZERO_DIMENSION

    if width <= max_width and height <= max_height:
        return Dimension.from_size(inner)

    ratio = width / height
    bound_ratio = max_width / max_height

    if bound_ratio < ratio:  # width is binding
        constrained_width = max_width
        constrained_height = constrained_width / ratio
    elif bound_ratio > ratio:  # height is binding
        constrained_height = max_height
        constrained_width = constrained_height * ratio
    else:
        constrained_width = max_width
        constrained_height = max_height

    logger.debug(
        "Constrained %sx%s to %sx%s (bounds %sx%s)",
        width,
        height,
        constrained_width,
        constrained_height,
        max_width,
        max_height,
    )
    return Dimension.of(constrained_width, constrained_height)


def constrain_to(inner: SupportsSize, bounds: SupportsSize) -> Dimension:
    """Constrain *inner* by the width and height of *bounds*.

    Args:
        inner: Size to constrain
        bounds: Outer size, for example a display or container Dimension

    Returns:
        The constrained Dimension
    """
    return constrain(inner, bounds.width, bounds.height)
