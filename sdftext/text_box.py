"""Text laid out inside a rectangular box."""

from __future__ import annotations

import math

from .font import Rect
from .text import Text


class TextBox(Text):
    """Text wrapped to the box width and cut off at the box height.

    A width or height of 0 leaves that direction unlimited.
    """

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        super().__init__()
        self._size = (float(width), float(height))

    @property
    def size(self) -> tuple[float, float]:
        return self._size

    @size.setter
    def size(self, size: tuple[float, float]) -> None:
        width, height = size
        self._size = (float(width), float(height))
        self._invalid = True
        self._bounds_invalid = True

    def width_at(self, y: float) -> float:
        return self._size[0]

    def max_height(self) -> float:
        return self._size[1]

    def outline(self, offset: tuple[float, float] = (0.0, 0.0)) -> Rect:
        """The box rectangle placed at offset."""
        ox, oy = offset
        width, height = self._size
        return Rect(ox, oy, ox + width, oy + height)

    def _next_line(self, y: float) -> tuple[float, bool]:
        y += math.floor(self.leading() + 0.5)
        height = self.max_height()
        return y, height == 0.0 or y < height