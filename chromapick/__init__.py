"""chromapick: color model conversions and a hue-ring / SV-triangle color picker core."""

import logging

__version__ = "0.1.0"

from .colors.color import BLACK, WHITE, Color
from .conversions import (
    cie_to_rgb,
    cmy_to_rgb,
    convert,
    hls_to_rgb,
    hsv_to_rgb,
    np_hsv_to_rgb,
    rgb_to_cie,
    rgb_to_cmy,
    rgb_to_hls,
    rgb_to_hsv,
)
from .raster import circle, dda, ellipse, filled_circle_points
from .selectors import (
    CircleGeometry,
    CircleSelector,
    ColorSelector,
    HitRegion,
    RectSelector,
    SelectorCursor,
)
from .settings import CircleStyle, RectStyle, RenderSettings
from .types.color_types import CIE, CMY, HLS, HSV, ColorSpace
from .image import save_image, to_image

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'BLACK',
    'WHITE',
    'Color',
    'CIE',
    'CMY',
    'HLS',
    'HSV',
    'ColorSpace',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hls',
    'hls_to_rgb',
    'rgb_to_cmy',
    'cmy_to_rgb',
    'rgb_to_cie',
    'cie_to_rgb',
    'convert',
    'dda',
    'circle',
    'filled_circle_points',
    'ellipse',
    'ColorSelector',
    'CircleSelector',
    'CircleGeometry',
    'RectSelector',
    'SelectorCursor',
    'HitRegion',
    'CircleStyle',
    'RectStyle',
    'RenderSettings',
    'to_image',
    'save_image',
]
