# src/geomfit/geometry/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsSize(Protocol):
    """Protocol for anything that exposes a width and a height.

    ``Dimension`` implements it, and so do third-party objects such as
    Pillow images, which lets callers pass them straight to the constrain
    helpers without converting first.
    """

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@runtime_checkable
class SupportsBounds(SupportsSize, Protocol):
    """Protocol for a bounding area: a size anchored at an ``(x, y)`` location."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...
