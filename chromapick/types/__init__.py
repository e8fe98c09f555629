from .color_types import CIE, CMY, HLS, HSV, ColorSpace, Point, PointF, is_hue_space
from .array_types import BYTES_PER_PIXEL, PixelBuffer

__all__ = [
    "CIE",
    "CMY",
    "HLS",
    "HSV",
    "ColorSpace",
    "Point",
    "PointF",
    "is_hue_space",
    "BYTES_PER_PIXEL",
    "PixelBuffer",
]
