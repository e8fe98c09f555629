import math
from typing import Tuple

from boundednumbers import clamp

HUE_360 = 360.0


def adjust_360(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    angle = math.fmod(angle, HUE_360)
    if angle < 0:
        angle += HUE_360
    # fmod of a tiny negative angle plus 360 rounds up to exactly 360
    if angle >= HUE_360:
        angle = 0.0
    return angle


def ensure_range(value: float, low: float, high: float) -> float:
    """Clamp a scalar into [low, high]."""
    return float(clamp(value, low, high))


def fadjust(value: float, maximum: float) -> float:
    """Clamp a scalar into [0, maximum]."""
    return ensure_range(value, 0.0, maximum)


def clamp_channel(value: int) -> int:
    """Clamp an already rounded channel into the 8-bit range."""
    return int(clamp(int(value), 0, 255))


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def normalize_pair(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def normalize_rect(x1: int, y1: int, x2: int, y2: int) -> Tuple[int, int, int, int]:
    """Order rectangle corners so that left <= right and top <= bottom."""
    left, right = normalize_pair(x1, x2)
    top, bottom = normalize_pair(y1, y2)
    return left, top, right, bottom


def valid_index(index: int, length: int) -> bool:
    return -1 < index < length
