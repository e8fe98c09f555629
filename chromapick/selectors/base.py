"""
Selector Base
=============

Shared state and host-facing API of every color selector.

A selector owns an RGBA pixel buffer of its current size, the selected color
with its HSV decomposition, and the cursors drawn over the buffer. The host
feeds it pointer events and sizes; it answers with colors and pixels.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Flag
from typing import Callable, List, Optional

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import Color
from ..conversions.channels import ColorLike, to_color
from ..conversions.to_hsv import rgb_to_hsv
from ..conversions.to_rgb import hsv_to_rgb
from ..settings import DEFAULT_RENDER_SETTINGS, RenderSettings
from ..types.array_types import BYTES_PER_PIXEL, PixelBuffer
from ..types.color_types import HSV
from ..utils.num_utils import adjust_360, ensure_range
from .cursor import SelectorCursor

logger = logging.getLogger(__name__)

ChangeHandler = Callable[["ColorSelector", Color], None]


class HitRegion(Flag):
    NONE = 0
    HUE_RING = 1
    SV_TRIANGLE = 2
    HUE_SV_RECT = 4


class ColorSelector(ABC):
    """
    Abstract color selector.

    Subclasses draw the widget in :meth:`_draw`, translate pointer positions
    in :meth:`_pointer_impl` and place their cursors in :meth:`_place_cursors`.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        settings: Optional[RenderSettings] = None,
        on_change: Optional[ChangeHandler] = None,
    ) -> None:
        self.settings = settings or DEFAULT_RENDER_SETTINGS
        self.on_change = on_change
        self._base_color = self.settings.base_color
        self._width = 0
        self._height = 0
        self._buffer: PixelBuffer = np.zeros((0, 0, BYTES_PER_PIXEL), dtype=np.uint8)
        self._pressed = False
        self._no_event = False

        self._hue = adjust_360(self.settings.start_hue)
        self._saturation = ensure_range(self.settings.start_saturation, 0.0, 1.0)
        self._value = ensure_range(self.settings.start_value, 0.0, 1.0)
        self._color = hsv_to_rgb(self._hue, self._saturation, self._value)

        self.resize(width, height)

    # ------------------ STATE ------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pressed(self) -> bool:
        return self._pressed

    @property
    def hsv(self) -> HSV:
        return HSV(self._hue, self._saturation, self._value)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: ColorLike) -> None:
        self.set_color(color)

    def get_color(self) -> Color:
        return self._color

    @property
    def base_color(self) -> Color:
        """Background color; changing it redraws the whole widget."""
        return self._base_color

    @base_color.setter
    def base_color(self, color: ColorLike) -> None:
        self._base_color = to_color(color)
        self._redraw()

    @property
    def border_color(self) -> Color:
        return self._base_color.inverted()

    @property
    def cursors(self) -> List[SelectorCursor]:
        return []

    # ------------------ COLOR ASSIGNMENT ------------------
    def set_color(self, color: ColorLike) -> None:
        """Select ``color``, move the cursors onto it and notify the listener."""
        color = to_color(color)
        if color == self._color:
            return

        self._color = color
        self._hue, self._saturation, self._value = rgb_to_hsv(color)
        self._color_assigned()
        self._place_cursors()
        self._notify()

    def set_color_without_event(self, color: ColorLike) -> None:
        self._no_event = True
        try:
            self.set_color(color)
        finally:
            self._no_event = False

    def _set_hsv(self, hue: float, saturation: float, value: float) -> None:
        """Store HSV from an interaction; listeners hear of it once the event ends."""
        self._hue = adjust_360(hue)
        self._saturation = ensure_range(saturation, 0.0, 1.0)
        self._value = ensure_range(value, 0.0, 1.0)

        self._color = hsv_to_rgb(self._hue, self._saturation, self._value)

    def _notify(self) -> None:
        if not self._no_event and self.on_change is not None:
            self.on_change(self, self._color)

    def _color_assigned(self) -> None:
        """Hook run after set_color stores a new color, before the cursors move."""

    # ------------------ POINTER ------------------
    def pointer_down(self, x: float, y: float) -> Optional[Color]:
        self._pressed = True
        self._press(x, y)
        return self._interact(x, y)

    def pointer_move(self, x: float, y: float) -> Optional[Color]:
        if not self._pressed:
            return None
        return self._interact(x, y)

    def pointer_up(self, x: float, y: float) -> None:
        self._pressed = False
        self._release()

    def _press(self, x: float, y: float) -> None:
        """Hook run on pointer-down before the press is applied as a move."""

    def _release(self) -> None:
        """Hook run on pointer-up."""

    def _interact(self, x: float, y: float) -> Optional[Color]:
        """Apply one pointer event; the new color and a single notification if it changed."""
        before = self._color
        self._pointer_impl(x, y)
        if self._color == before:
            return None
        self._notify()
        return self._color

    @abstractmethod
    def _pointer_impl(self, x: float, y: float) -> None:
        ...

    @abstractmethod
    def hit_test(self, x: float, y: float) -> HitRegion:
        ...

    # ------------------ SIZE & DRAWING ------------------
    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer, recompute the layout and redraw."""
        self._width = max(int(width), 0)
        self._height = max(int(height), 0)
        self._buffer = np.zeros((self._height, self._width, BYTES_PER_PIXEL), dtype=np.uint8)
        logger.debug("%s resized to %dx%d", type(self).__name__, self._width, self._height)
        self._layout()
        self._redraw()
        self._place_cursors()

    def _redraw(self) -> None:
        if self._buffer.size == 0:
            return
        self._draw(self._buffer)

    @abstractmethod
    def _layout(self) -> None:
        ...

    @abstractmethod
    def _draw(self, buffer: NDArray) -> None:
        ...

    @abstractmethod
    def _place_cursors(self) -> None:
        ...

    def render(self, include_cursors: bool = False) -> PixelBuffer:
        """Copy of the current (height, width, 4) RGBA buffer."""
        out = self._buffer.copy()
        if include_cursors:
            for cursor in self.cursors:
                cursor.stamp(out)
        return out

    def render_into(self, buffer, width: int, height: int, include_cursors: bool = False) -> None:
        """
        Copy the pixels into a caller-owned row-major RGBA buffer.

        Args:
            buffer: Writable ndarray or buffer-protocol object of
                ``width * height * 4`` bytes
            width: Width the caller expects; must match the selector
            height: Height the caller expects; must match the selector

        Raises:
            ValueError: If the size does not match the selector or the buffer
            TypeError: If the buffer is read-only
        """
        if (width, height) != (self._width, self._height):
            raise ValueError(
                f"Buffer is {width}x{height}, selector is {self._width}x{self._height}"
            )

        target = buffer if isinstance(buffer, np.ndarray) else np.frombuffer(buffer, dtype=np.uint8)
        if not target.flags.writeable:
            raise TypeError("render_into needs a writable buffer")

        if not target.flags.c_contiguous:
            raise ValueError("render_into needs a C-contiguous buffer")

        expected = width * height * BYTES_PER_PIXEL
        if target.nbytes != expected:
            raise ValueError(f"Expected {expected} bytes, got {target.nbytes}")

        pixels = self.render(include_cursors=include_cursors)
        np.copyto(target.reshape(-1).view(np.uint8), pixels.reshape(-1))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, color={self._color!r})"
