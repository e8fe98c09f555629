"""
Integer scan conversion: lines, circle outlines, filled discs and ellipses.

Every routine reports its points through an ``on_point(x, y)`` callback so
callers decide whether to plot, collect or hit-test them. ``circle`` and
``filled_circle_points`` work in offsets from the center; ``dda`` and
``ellipse`` work in absolute coordinates.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, List, Tuple

from ..types.color_types import Point
from ..utils.num_utils import normalize_rect
from .occupancy import OccupancyMatrix

logger = logging.getLogger(__name__)

PointCallback = Callable[[int, int], None]


def dda(x1: int, y1: int, x2: int, y2: int, on_point: PointCallback) -> None:
    """
    Digital differential analyzer line from (x1, y1) to (x2, y2).

    The axis with the larger absolute delta is stepped one unit at a time
    (Y on ties); the other axis moves by one whenever the error accumulator
    goes negative. Emits exactly ``major + 1`` points, start to end.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)

    if dx > dy:
        step = 1 if x2 > x1 else -1
        minor_step = 1 if y2 > y1 else -1
        flag = dx >> 1
        y = y1
        for x in range(x1, x2 + step, step):
            on_point(x, y)
            flag -= dy
            if flag < 0:
                flag += dx
                y += minor_step
    else:
        step = 1 if y2 > y1 else -1
        minor_step = 1 if x2 > x1 else -1
        flag = dy >> 1
        x = x1
        for y in range(y1, y2 + step, step):
            on_point(x, y)
            flag -= dx
            if flag < 0:
                flag += dy
                x += minor_step


def _octant_steps(diameter: int):
    """
    Yield ``(x, y, even)`` for each step of the midpoint circle loop.

    ``even`` is 1 for even diameters, shifting the positive half inward so
    the outline spans exactly ``diameter`` pixels.
    """
    radius = diameter >> 1
    even = 1 if diameter % 2 == 0 else 0
    x = radius
    y = 0
    while x >= y:
        yield x, y, even
        radius -= 2 * y + 1
        y += 1
        if radius < 0:
            radius += 2 * (x - 1)
            x -= 1


def circle(diameter: int, on_point: PointCallback) -> None:
    """
    Eight-way symmetric circle outline, each offset reported once.

    A diameter of 0 or 1 reports only the center ``(0, 0)``.
    """
    if (diameter >> 1) <= 0:
        on_point(0, 0)
        return

    seen = OccupancyMatrix(diameter)

    def sub(px: int, py: int) -> None:
        if seen.mark(px, py):
            on_point(px, py)

    for x, y, even in _octant_steps(diameter):
        xp, xn = x - even, -x + even
        yp, yn = y - even, -y + even
        sub(xp, y)
        sub(xp, yn)
        sub(-x, y)
        sub(-x, yn)
        sub(yp, x)
        sub(yp, xn)
        sub(-y, x)
        sub(-y, xn)


def filled_circle_points(diameter: int) -> Tuple[List[Point], float]:
    """
    Every integer offset inside a disc of the given diameter.

    Each octant point is extended horizontally toward the center until a
    point that is already covered is reached.

    Returns:
        (points, covering_radius): unique offsets from the center and the
        distance of the farthest one
    """
    if (diameter >> 1) <= 0:
        return [(0, 0)], 0.0

    seen = OccupancyMatrix(diameter)
    points: List[Point] = []
    longest = 0

    def span(vx: int, vy: int, step: int, adjust: int) -> None:
        nonlocal longest
        count = abs(vx) + adjust
        while count > 0 and seen.mark(vx, vy):
            points.append((vx, vy))
            longest = max(longest, vx * vx + vy * vy)
            vx += step
            count -= 1

    for x, y, even in _octant_steps(diameter):
        xp, xn = x - even, -x + even
        yp, yn = y - even, -y + even
        span(xp, y, -1, 1)
        span(xp, yn, -1, 1)
        span(-x, y, 1, 1)
        span(-x, yn, 1, 1)
        span(yp, x, -1, 0)
        span(yp, xn, -1, 0)
        span(-y, x, 1, 1)
        span(-y, xn, 1, 1)

    return points, math.sqrt(longest)


def ellipse(x1: int, y1: int, x2: int, y2: int, on_point: PointCallback) -> None:
    """
    Ellipse outline inscribed in the rectangle (x1, y1)-(x2, y2).

    Steps along the longer extent and scales the other axis by the ratio of
    the semi-axes, reflecting each step into all eight sign combinations.
    Points may repeat. Nothing is drawn when either semi-axis is 0.
    """
    left, top, right, bottom = normalize_rect(x1, y1, x2, y2)
    x_size = right - left + 1
    y_size = bottom - top + 1
    rx = x_size >> 1
    ry = y_size >> 1

    if rx <= 0 or ry <= 0:
        logger.debug("ellipse skipped, degenerate rect %s", (x1, y1, x2, y2))
        return

    cx = left + rx
    cy = top + ry

    def reflect(p0: int, q0: int, p1: int, q1: int) -> None:
        on_point(cx + p0, cy + q1)
        on_point(cx - p0, cy + q1)
        on_point(cx + p0, cy - q1)
        on_point(cx - p0, cy - q1)
        on_point(cx + q0, cy + p1)
        on_point(cx - q0, cy + p1)
        on_point(cx + q0, cy - p1)
        on_point(cx - q0, cy - p1)

    if x_size > y_size:
        major, minor = rx, 0
        flag = major
        while major >= minor:
            reflect(major, minor, major * ry // rx, minor * ry // rx)
            flag -= 2 * minor + 1
            if flag < 0:
                flag += 2 * (major - 1)
                major -= 1
            minor += 1
    else:
        major, minor = ry, 0
        flag = major
        while major >= minor:
            reflect(major * rx // ry, minor * rx // ry, major, minor)
            flag -= 2 * minor + 1
            if flag < 0:
                flag += 2 * (major - 1)
                major -= 1
            minor += 1
