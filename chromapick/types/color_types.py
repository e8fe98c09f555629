from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple

Point = Tuple[int, int]
PointF = Tuple[float, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSV = "hsv"
    HLS = "hls"
    CMY = "cmy"
    CIE = "cie"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HLS}


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""
    hue: float
    saturation: float
    value: float


class HLS(NamedTuple):
    """Hue in degrees [0, 360), lightness and saturation in [0, 1]."""
    hue: float
    lightness: float
    saturation: float


class CMY(NamedTuple):
    cyan: int
    magenta: int
    yellow: int


class CIE(NamedTuple):
    """Chromaticity (x, y) plus luminance Y."""
    x: float
    y: float
    luminance: float


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space carries a hue channel (HSV or HLS).

    Args:
        color_space: Color space or its name
    Returns:
        True if hue-based, False otherwise
    """
    if isinstance(color_space, ColorSpace):
        return color_space in HUE_SPACES
    return color_space.lower() in {space.value for space in HUE_SPACES}
