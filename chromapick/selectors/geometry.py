from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..settings import DEFAULT_CIRCLE_STYLE, CircleStyle
from ..types.color_types import Point, PointF
from ..utils.num_utils import trunc_div

Weights = Tuple[float, float, float]


@dataclass(frozen=True)
class CircleGeometry:
    """
    Layout of the hue ring and SV triangle for one widget size.

    P0 (full hue) sits at 0 degrees, P1 (white) at -120 and P2 (black) at
    +120 on the inner radius. Rebuilt on every resize.
    """
    width: int
    height: int
    diameter: int
    radius: int
    center: Point
    inner_delta: int
    inner_radius: int
    p0: Point
    p1: Point
    p2: Point
    rect: Tuple[int, int, int, int]
    denominator: int
    hue_radius: int
    hue_cursor_size: float
    sv_cursor_size: float

    @classmethod
    def from_size(cls, width: int, height: int, style: CircleStyle = DEFAULT_CIRCLE_STYLE) -> CircleGeometry:
        diameter = max(min(width, height) - 2 * style.margin, 0)
        radius = diameter // 2
        cx = radius + int((width - diameter) / 2)
        cy = radius + int((height - diameter) / 2)

        inner_delta = diameter // style.outer_ratio
        inner_radius = (inner_delta * style.inner_ratio) // 2

        def vertex(angle: float) -> Point:
            rad = math.radians(angle)
            return (
                cx + int(inner_radius * math.cos(rad)),
                cy + int(inner_radius * math.sin(rad)),
            )

        p0, p1, p2 = vertex(0), vertex(-120), vertex(120)

        rect = (
            min(p1[0], p2[0]),
            min(p1[1], p2[1]),
            p0[0],
            max(p1[1], p2[1]),
        )
        denominator = (p1[1] - p2[1]) * (p0[0] - p2[0]) + (p2[0] - p1[0]) * (p0[1] - p2[1])

        return cls(
            width=width,
            height=height,
            diameter=diameter,
            radius=radius,
            center=(cx, cy),
            inner_delta=inner_delta,
            inner_radius=inner_radius,
            p0=p0,
            p1=p1,
            p2=p2,
            rect=rect,
            denominator=denominator,
            hue_radius=inner_radius + trunc_div(inner_delta, 2),
            hue_cursor_size=inner_delta / 2,
            sv_cursor_size=inner_delta / 3,
        )

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0

    @property
    def triangle_area(self) -> float:
        (x0, y0), (x1, y1), (x2, y2) = self.p0, self.p1, self.p2
        return 0.5 * abs(x0 * (y1 - y2) + x1 * (y2 - y0) + x2 * (y0 - y1))

    def barycentric(self, x: float, y: float) -> Optional[Weights]:
        """Weights of (x, y) for (P0, P1, P2); None for a collapsed triangle."""
        if self.denominator == 0:
            return None
        (x0, y0), (x1, y1), (x2, y2) = self.p0, self.p1, self.p2
        w0 = ((y1 - y2) * (x - x2) + (x2 - x1) * (y - y2)) / self.denominator
        w1 = ((y2 - y0) * (x - x2) + (x0 - x2) * (y - y2)) / self.denominator
        return w0, w1, 1 - w0 - w1

    def in_ring(self, x: float, y: float) -> bool:
        dx = x - self.center[0]
        dy = y - self.center[1]
        d2 = dx * dx + dy * dy
        return self.inner_radius ** 2 <= d2 <= self.radius ** 2

    def in_triangle(self, x: float, y: float) -> bool:
        weights = self.barycentric(x, y)
        return weights is not None and all(w >= 0 for w in weights)

    def point_at(self, weights: Weights) -> PointF:
        w0, w1, w2 = weights
        return (
            w0 * self.p0[0] + w1 * self.p1[0] + w2 * self.p2[0],
            w0 * self.p0[1] + w1 * self.p1[1] + w2 * self.p2[1],
        )

    def hue_point(self, hue: float) -> PointF:
        """Position on the hue cursor track for ``hue`` degrees."""
        rad = math.radians(hue)
        return (
            self.center[0] + self.hue_radius * math.cos(rad),
            self.center[1] + self.hue_radius * math.sin(rad),
        )
