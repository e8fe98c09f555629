from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import BLACK, WHITE, Color
from ..raster.dda import ellipse, filled_circle_points
from ..types.color_types import PointF
from ..utils.num_utils import valid_index


class SelectorCursor:
    """
    Round marker shown over a selector at the current color.

    The cursor is centered on ``(x, y)`` and spans ``size`` pixels. Its hit
    area is the disc produced by :func:`filled_circle_points` for that size.
    """

    def __init__(self, size: float = 0.0) -> None:
        self.x = 0.0
        self.y = 0.0
        self._size = 0.0
        self._covering_radius = 0.0
        self.update(size)

    @property
    def size(self) -> float:
        return self._size

    @property
    def covering_radius(self) -> float:
        return self._covering_radius

    @property
    def center(self) -> PointF:
        return self.x, self.y

    def update(self, size: float) -> None:
        """Resize the cursor and rebuild its disc."""
        self._size = max(float(size), 0.0)
        _, self._covering_radius = filled_circle_points(int(self._size))

    def move_to(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Integer (left, top, right, bottom) of the cursor square."""
        half = self._size / 2
        return (
            int(math.floor(self.x - half)),
            int(math.floor(self.y - half)),
            int(math.floor(self.x + half)),
            int(math.floor(self.y + half)),
        )

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) <= max(self._covering_radius, 0.5)

    def stamp(self, buffer: NDArray) -> None:
        """Draw the outline onto an (h, w, 4) RGBA buffer: black, then white inset by 1."""
        left, top, right, bottom = self.bounds()
        self._outline(buffer, (left, top, right, bottom), BLACK)
        self._outline(buffer, (left + 1, top + 1, right - 1, bottom - 1), WHITE)

    @staticmethod
    def _outline(buffer: NDArray, rect: Tuple[int, int, int, int], color: Color) -> None:
        height, width = buffer.shape[:2]
        rgba = np.array(color.rgba, dtype=np.uint8)

        def plot(px: int, py: int) -> None:
            if valid_index(px, width) and valid_index(py, height):
                buffer[py, px] = rgba

        ellipse(*rect, plot)

    def __repr__(self) -> str:
        return f"SelectorCursor(x={self.x:.1f}, y={self.y:.1f}, size={self._size:.1f})"
