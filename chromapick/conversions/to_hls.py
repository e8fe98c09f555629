from ..types.color_types import HLS
from .channels import ColorLike, get_min_max_diff, rgb_channels


def rgb_to_hls(color: ColorLike) -> HLS:
    """
    Convert an RGB color to HLS.

    Hue uses the same R, G, B "is max" checks as :func:`rgb_to_hsv`
    (last matching branch wins), in the product form
    ``(channel difference) * 60 / diff`` offset by 0, 120 and 240 degrees.
    """
    r, g, b = rgb_channels(color)
    c_min, c_max, diff = get_min_max_diff(r, g, b)
    added = c_min + c_max
    lightness = added / 510

    # integer denominators keep saturation within [0, 1]
    saturation = 0.0
    if added > 255:
        if added != 510:
            saturation = diff / (510 - added)
    else:
        if added != 0:
            saturation = diff / added

    hue = 0.0
    if diff != 0:
        if r == c_max:
            hue = 0 + (g - b) * 60 / diff
        if g == c_max:
            hue = 120 + (b - r) * 60 / diff
        if b == c_max:
            hue = 240 + (r - g) * 60 / diff

        if hue < 0:
            hue += 360

    return HLS(hue, lightness, saturation)
