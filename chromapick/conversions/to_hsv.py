from ..types.color_types import HSV
from .channels import ColorLike, get_min_max_diff, rgb_channels


def rgb_to_hsv(color: ColorLike) -> HSV:
    """
    Convert an RGB color to HSV.

    Value is ``max / 256``; the divisor 256 is kept for compatibility with
    stored selections, so white maps to V = 255/256 rather than 1.

    The hue checks "R is max", "G is max", "B is max" run in that order with
    no ``else``: when channels tie for the maximum the last matching branch
    decides the hue.
    TODO: revisit the unconditional overwrite once callers no longer depend
    on the exact tie-break.

    Args:
        color: Color or (r, g, b) sequence

    Returns:
        HSV(hue in [0, 360), saturation in [0, 1], value in [0, 255/256])
    """
    r, g, b = rgb_channels(color)
    c_min, c_max, diff = get_min_max_diff(r, g, b)

    value = c_max / 256

    saturation = 0.0
    if c_max != 0:
        saturation = diff / c_max

    hue = 0.0
    if saturation != 0:
        if r == c_max:
            hue = 0 + (g - b) / diff
        if g == c_max:
            hue = 2 + (b - r) / diff
        if b == c_max:
            hue = 4 + (r - g) / diff

    hue *= 60
    if hue < 0:
        hue += 360

    return HSV(hue, saturation, value)
