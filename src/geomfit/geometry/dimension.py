"""Immutable width/height value type."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from geomfit.errors import InvalidArgumentError
from geomfit.geometry.protocols import SupportsSize


class Dimension(BaseModel):
    """An immutable ``(width, height)`` pair of non-negative finite reals.

    Instances are frozen: assigning to ``width`` or ``height`` raises
    ``pydantic.ValidationError``. Equality compares both components exactly,
    with no epsilon tolerance.

    Examples:
        >>> Dimension.of(3000, 2000).constrained_by(400, 500)
        Dimension(width=400.0, height=266.6666666666667)
    """

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., ge=0, allow_inf_nan=False, description="Width")
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Height")

    @classmethod
    def of(cls, width: float, height: float) -> Dimension:
        """Return a dimension of the given size.

        ``(0, 0)`` yields the shared ``ZERO_DIMENSION`` instance.

        Args:
            width: Non-negative width
            height: Non-negative height

        Returns:
            Dimension with the given components
        """
        if width == 0 and height == 0:
            return ZERO_DIMENSION
        return cls(width=float(width), height=float(height))

    @classmethod
    def from_size(cls, size: SupportsSize) -> Dimension:
        """Convert any object exposing ``width`` and ``height`` to a Dimension.

        A Dimension is returned as-is.
        """
        if isinstance(size, Dimension):
            return size
        return cls.of(size.width, size.height)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height.

        Raises:
            InvalidArgumentError: If the height is zero
        """
        if self.height == 0:
            raise InvalidArgumentError(
                f"aspect ratio undefined for zero height: {self}",
                argument="height",
                value=self.height,
            )
        return self.width / self.height

    @property
    def is_empty(self) -> bool:
        """Whether either side is zero."""
        return self.width == 0 or self.height == 0

    def constrained_by(self, max_width: float, max_height: float) -> Dimension:
        """Return this dimension scaled down to fit ``max_width`` x ``max_height``.

        See ``geomfit.geometry.constrain.constrain``.
        """
        from geomfit.geometry.constrain import constrain

        return constrain(self, max_width, max_height)

    def constrained_to(self, bounds: SupportsSize) -> Dimension:
        """Return this dimension scaled down to fit within *bounds*."""
        from geomfit.geometry.constrain import constrain_to

        return constrain_to(self, bounds)

    def __str__(self) -> str:
        return f"{{width:{self.width},height:{self.height}}}"


ZERO_DIMENSION: Final[Dimension] = Dimension(width=0.0, height=0.0)
