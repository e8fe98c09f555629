from ..types.color_types import CIE
from .channels import ColorLike, rgb_channels


def rgb_to_cie(color: ColorLike) -> CIE:
    """
    Convert device RGB to CIE chromaticity (x, y) and luminance Y.

    x and y are normalized by W = X + Y + Z; black (W == 0) leaves them at 0.
    """
    r, g, b = rgb_channels(color)

    x = (0.478 * r + 0.299 * g + 0.175 * b) / 255
    y = (0.263 * r + 0.655 * g + 0.081 * b) / 255
    luminance = y

    z = (0.020 * r + 0.160 * g + 0.908 * b) / 255
    w = x + y + z

    if w != 0:
        x = x / w
        y = y / w

    return CIE(x, y, luminance)
