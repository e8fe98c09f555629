from typing import Sequence, Tuple, Union

from ..colors.color import Color

ColorLike = Union[Color, Sequence[int]]


def to_color(color: ColorLike) -> Color:
    """Accept a Color or an (r, g, b[, a]) sequence."""
    if isinstance(color, Color):
        return color
    return Color(*color)


def rgb_channels(color: ColorLike) -> Tuple[int, int, int]:
    return to_color(color).rgb


def get_min_max_diff(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Return (min, max, max - min) of the three channels."""
    c_min = min(r, g, b)
    c_max = max(r, g, b)
    return c_min, c_max, c_max - c_min
