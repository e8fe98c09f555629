"""
Hue ring and saturation/value triangle selector.

The ring maps angle to hue at full saturation and value. The triangle inside
it spans the current hue (P0), white (P1) and black (P2); barycentric
weights of a point give its value ``w0 + w1`` and saturation ``w0 / value``.
Edges are anti-aliased analytically against the background.
"""
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..conversions.to_rgb import np_hsv_to_rgb
from ..settings import DEFAULT_CIRCLE_STYLE, CircleStyle, RenderSettings
from .base import ChangeHandler, ColorSelector, HitRegion
from .cursor import SelectorCursor
from .geometry import CircleGeometry

logger = logging.getLogger(__name__)

ALPHA_EPSILON = 0.001


def blend(fg: NDArray, bg: NDArray, alpha: NDArray) -> NDArray:
    """Integer blend ``(fg*A + bg*(255-A)) // 255`` with ``A = trunc(alpha*255)``."""
    a = (np.clip(alpha, 0.0, 1.0) * 255).astype(np.int64)[..., None]
    return (fg * a + bg * (255 - a)) // 255


class CircleSelector(ColorSelector):
    """
    Hue ring plus SV triangle.

    Example:
        >>> selector = CircleSelector(200, 200)
        >>> selector.color
        Color(255, 0, 0)
        >>> pixels = selector.render()
        >>> pixels.shape
        (200, 200, 4)
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        style: Optional[CircleStyle] = None,
        settings: Optional[RenderSettings] = None,
        on_change: Optional[ChangeHandler] = None,
    ) -> None:
        self.style = style or DEFAULT_CIRCLE_STYLE
        self.geometry = CircleGeometry.from_size(0, 0, self.style)
        self.hue_cursor = SelectorCursor()
        self.sv_cursor = SelectorCursor()
        self._drag = HitRegion.NONE
        super().__init__(width, height, settings=settings, on_change=on_change)

    @property
    def cursors(self) -> List[SelectorCursor]:
        return [self.hue_cursor, self.sv_cursor]

    @property
    def drag_region(self) -> HitRegion:
        """Regions fixed by the current press; NONE when idle."""
        return self._drag

    # ------------------ LAYOUT ------------------
    def _layout(self) -> None:
        self.geometry = CircleGeometry.from_size(self._width, self._height, self.style)
        self.hue_cursor.update(self.geometry.hue_cursor_size)
        self.sv_cursor.update(self.geometry.sv_cursor_size)
        logger.debug(
            "circle geometry: center=%s radius=%d inner=%d triangle=%s",
            self.geometry.center,
            self.geometry.radius,
            self.geometry.inner_radius,
            (self.geometry.p0, self.geometry.p1, self.geometry.p2),
        )

    def _place_cursors(self) -> None:
        self.hue_cursor.move_to(*self.geometry.hue_point(self._hue))

        if self._value == 0:
            weights = (0.0, 0.0, 1.0)
        else:
            sv = self._saturation * self._value
            weights = (sv, self._value - sv, 1 - self._value)
        self.sv_cursor.move_to(*self.geometry.point_at(weights))

    # ------------------ HIT TESTING ------------------
    def hit_test(self, x: float, y: float) -> HitRegion:
        region = HitRegion.NONE
        if self.geometry.is_degenerate:
            return region
        if self.geometry.in_ring(x, y):
            region |= HitRegion.HUE_RING
        if self.geometry.in_triangle(x, y):
            region |= HitRegion.SV_TRIANGLE
        return region

    def _press(self, x: float, y: float) -> None:
        self._drag = self.hit_test(x, y)
        if self._drag or self.geometry.is_degenerate:
            return
        # a press on a cursor's disc grabs it even off the ring or triangle
        if self.sv_cursor.contains(x, y):
            self._drag = HitRegion.SV_TRIANGLE
        elif self.hue_cursor.contains(x, y):
            self._drag = HitRegion.HUE_RING

    def _release(self) -> None:
        self._drag = HitRegion.NONE

    def _pointer_impl(self, x: float, y: float) -> None:
        if HitRegion.HUE_RING in self._drag:
            self._move_hue(x, y)
        if HitRegion.SV_TRIANGLE in self._drag:
            self._move_sv(x, y)

    def _move_hue(self, x: float, y: float) -> None:
        dx = x - self.geometry.center[0]
        dy = y - self.geometry.center[1]
        hue = math.degrees(math.atan2(dy, dx))
        if hue < 0:
            hue += 360

        self._set_hsv(hue, self._saturation, self._value)
        self._redraw_triangle()
        self.hue_cursor.move_to(*self.geometry.hue_point(self._hue))

    def _move_sv(self, x: float, y: float) -> None:
        weights = self.geometry.barycentric(x, y)
        if weights is None:
            return

        w0, w1, w2 = (max(w, 0.0) for w in weights)
        total = w0 + w1 + w2
        if total <= 0:
            return
        w0, w1, w2 = w0 / total, w1 / total, w2 / total

        value = w0 + w1
        saturation = w0 / value if value > 0 else 0.0

        self._set_hsv(self._hue, saturation, value)
        self.sv_cursor.move_to(*self.geometry.point_at((w0, w1, w2)))

    # ------------------ RENDERING ------------------
    def _color_assigned(self) -> None:
        self._redraw_triangle()

    def _redraw_triangle(self) -> None:
        if self._buffer.size == 0 or self.geometry.is_degenerate:
            return
        self._draw_triangle(self._buffer)

    def _draw(self, buffer: NDArray) -> None:
        self._draw_ring(buffer)
        if not self.geometry.is_degenerate:
            self._draw_triangle(buffer)

    def _draw_ring(self, buffer: NDArray) -> None:
        """Fill every pixel: background, or the hue ring blended over it."""
        height, width = buffer.shape[:2]
        bg = np.array(self._base_color.rgb, dtype=np.int64)
        buffer[..., :3] = bg
        buffer[..., 3] = 255

        geo = self.geometry
        if geo.is_degenerate:
            logger.debug("ring skipped, degenerate geometry %dx%d", width, height)
            return

        aa = self.style.aa_width
        outer = float(geo.radius)
        inner = float(geo.inner_radius)

        indices = np.indices((height, width), dtype=np.float64)
        dy = indices[0] - geo.center[1]
        dx = indices[1] - geo.center[0]
        dist = np.sqrt(dx * dx + dy * dy)

        band = (dist < outer + aa) & (dist > inner - aa)
        if not band.any():
            return

        dx, dy, dist = dx[band], dy[band], dist[band]
        hue = np.degrees(np.arctan2(dy, dx))
        fg = np_hsv_to_rgb(hue, 1.0, 1.0).astype(np.int64)

        outer_alpha = np.where(dist > outer - aa, np.clip((outer + aa - dist) / (2 * aa), 0.0, 1.0), 1.0)
        inner_alpha = np.where(dist < inner + aa, np.clip((dist - (inner - aa)) / (2 * aa), 0.0, 1.0), 1.0)
        alpha = outer_alpha * inner_alpha

        rgb = np.where((alpha > ALPHA_EPSILON)[..., None], blend(fg, bg, alpha), bg)
        buffer[band, :3] = rgb.astype(np.uint8)

    def _triangle_bounds(self, height: int, width: int) -> Tuple[int, int, int, int]:
        left, top, right, bottom = self.geometry.rect
        return max(left, 0), max(top, 0), min(right, width - 1), min(bottom, height - 1)

    def _draw_triangle(self, buffer: NDArray) -> None:
        geo = self.geometry
        area = geo.triangle_area
        if area < 1 or geo.denominator == 0:
            logger.debug("triangle skipped, area %.2f", area)
            return

        height, width = buffer.shape[:2]
        left, top, right, bottom = self._triangle_bounds(height, width)
        if left > right or top > bottom:
            return

        rows = bottom - top + 1
        workers = self.settings.worker_count(rows)
        if workers == 1:
            self._triangle_rows(buffer, top, bottom + 1, left, right, area)
            return

        step = -(-rows // workers)
        bands = [(start, min(start + step, bottom + 1)) for start in range(top, bottom + 1, step)]

        def render_band(rng: Tuple[int, int]) -> None:
            self._triangle_rows(buffer, rng[0], rng[1], left, right, area)

        # each band owns its rows; the executor joins before returning
        with ThreadPoolExecutor(max_workers=workers) as executor:
            list(executor.map(render_band, bands))

    def _triangle_rows(
        self,
        buffer: NDArray,
        row_start: int,
        row_end: int,
        left: int,
        right: int,
        area: float,
    ) -> None:
        """Render rows [row_start, row_end) of the triangle between left and right."""
        geo = self.geometry
        (x0, y0), (x1, y1), (x2, y2) = geo.p0, geo.p1, geo.p2
        denom = geo.denominator
        side = math.hypot(x1 - x2, y1 - y2)
        height_scale = 2 * area / max(1.0, side)

        xs = np.arange(left, right + 1, dtype=np.float64)[None, :]
        ys = np.arange(row_start, row_end, dtype=np.float64)[:, None]

        w0 = ((y1 - y2) * (xs - x2) + (x2 - x1) * (ys - y2)) / denom
        w1 = ((y2 - y0) * (xs - x2) + (x0 - x2) * (ys - y2)) / denom
        w2 = 1 - w0 - w1

        min_dist = np.minimum(np.minimum(w0, w1), w2) * height_scale
        drawn = min_dist > -self.style.aa_width
        if not drawn.any():
            return

        value = np.clip(w0 + w1, 0.0, 1.0)
        safe_value = np.where(value > 0, value, 1.0)
        saturation = np.where(value > 0, np.clip(w0 / safe_value, 0.0, 1.0), 0.0)
        rgb = np_hsv_to_rgb(self._hue, saturation, value).astype(np.int64)

        line_width = self.style.line_width
        border = np.array(self.border_color.rgb, dtype=np.int64)
        on_border = min_dist < line_width
        rgb = np.where(on_border[..., None], blend(border, rgb, (line_width - min_dist) * 2), rgb)

        bg = np.array(self._base_color.rgb, dtype=np.int64)
        on_edge = min_dist < 0.5
        rgb = np.where(on_edge[..., None], blend(rgb, bg, min_dist + 0.5), rgb)

        region = buffer[row_start:row_end, left:right + 1]
        region[drawn, :3] = rgb[drawn].astype(np.uint8)
        region[drawn, 3] = 255
