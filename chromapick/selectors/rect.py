from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions.to_rgb import np_hsv_to_rgb
from ..settings import DEFAULT_RECT_STYLE, RectStyle, RenderSettings
from ..utils.num_utils import HUE_360, ensure_range, fadjust
from .base import ChangeHandler, ColorSelector, HitRegion
from .cursor import SelectorCursor

logger = logging.getLogger(__name__)


def rect_saturation_value(ny):
    """
    Saturation and value for a normalized row position.

    Saturation rises 0 -> 1 over the top half at full value; value falls
    1 -> 0 over the bottom half at full saturation. Works on scalars and
    arrays.
    """
    ny = np.asarray(ny, dtype=np.float64)
    upper = ny <= 0.5
    saturation = np.where(upper, np.clip(ny * 2, 0.0, 1.0), 1.0)
    value = np.where(upper, 1.0, np.clip(1 - (ny - 0.5) * 2, 0.0, 1.0))
    return saturation, value


class RectSelector(ColorSelector):
    """Hue along x, saturation then value along y."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        style: Optional[RectStyle] = None,
        settings: Optional[RenderSettings] = None,
        on_change: Optional[ChangeHandler] = None,
    ) -> None:
        self.style = style or DEFAULT_RECT_STYLE
        self.cursor = SelectorCursor(self.style.cursor_size)
        super().__init__(width, height, settings=settings, on_change=on_change)

    @property
    def cursors(self) -> List[SelectorCursor]:
        return [self.cursor]

    def _inner_size(self) -> Tuple[float, float]:
        return max(1.0, self._width - 1), max(1.0, self._height - 1)

    def _layout(self) -> None:
        self.cursor.update(self.style.cursor_size)

    def _draw(self, buffer: NDArray) -> None:
        height, width = buffer.shape[:2]
        hue = np.clip(np.arange(width, dtype=np.float64) / width, 0.0, 1.0) * HUE_360
        saturation, value = rect_saturation_value(np.arange(height, dtype=np.float64) / height)

        buffer[..., :3] = np_hsv_to_rgb(hue[None, :], saturation[:, None], value[:, None])
        buffer[..., 3] = 255

    def _place_cursors(self) -> None:
        inner_w, inner_h = self._inner_size()
        x = inner_w * self._hue / HUE_360
        if abs(self._value - 1) < abs(self._saturation - 1):
            y = self._saturation * (inner_h * 0.5)
        else:
            y = inner_h * 0.5 + (1 - self._value) * (inner_h * 0.5)
        self.cursor.move_to(x, y)

    def hit_test(self, x: float, y: float) -> HitRegion:
        if 0 <= x < self._width and 0 <= y < self._height:
            return HitRegion.HUE_SV_RECT
        return HitRegion.NONE

    def _pointer_impl(self, x: float, y: float) -> None:
        x = fadjust(x, self._width)
        y = fadjust(y, self._height)
        inner_w, inner_h = self._inner_size()

        nx = x / inner_w
        ny = y / inner_h
        hue = fadjust(nx, 1.0) * HUE_360

        # the pointer mapping switches halves strictly below the middle
        if ny < 0.5:
            saturation, value = ensure_range(ny * 2, 0.0, 1.0), 1.0
        else:
            saturation, value = 1.0, ensure_range(1 - (ny - 0.5) * 2, 0.0, 1.0)

        self._set_hsv(hue, saturation, value)
        self.cursor.move_to(x, y)
