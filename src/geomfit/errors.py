"""Exception classes for geomfit.

This module defines the small hierarchy of errors raised by the geometry
helpers and the image utilities built on top of them.
"""

from __future__ import annotations

from typing import Any, Optional


class GeometryError(Exception):
    """Base class for all errors raised by geomfit."""


class InvalidArgumentError(GeometryError, ValueError):
    """Raised when a geometry operation receives an argument it cannot use.

    Subclasses ``ValueError`` so callers that already guard numeric input
    with ``except ValueError`` keep working.
    """

    def __init__(
        self, message: str, argument: Optional[str] = None, value: Any = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            argument: Name of the offending argument, if known
            value: The rejected value
        """
        super().__init__(message)
        self.message: str = message
        self.argument: Optional[str] = argument
        self.value: Any = value

    @classmethod
    def non_positive_dimension(cls, width: float, height: float) -> InvalidArgumentError:
        """Create the error for an inner dimension that cannot be scaled.

        Args:
            width: Width of the rejected dimension
            height: Height of the rejected dimension

        Returns:
            InvalidArgumentError naming the dimension
        """
        return cls(
            f"cannot constrain a non-positive dimension: width={width}, height={height}",
            argument="dimension",
            value=(width, height),
        )

    @classmethod
    def negative_bound(cls, name: str, value: float) -> InvalidArgumentError:
        """Create the error for a constraining bound that is negative or NaN."""
        return cls(
            f"cannot constrain by {name.replace('_', ' ')} {value}: must be non-negative",
            argument=name,
            value=value,
        )


class ImageReadError(GeometryError):
    """Raised when an image file cannot be opened to read its size."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        """Initialize with image error details.

        Args:
            message: Description of the failure
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error
