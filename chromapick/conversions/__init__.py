"""
chromapick Color Space Conversions
==================================

Pure, stateless conversions between 8-bit RGB and the HSV, HLS, CMY and
CIE xyY models used by the selectors.

Conversion Functions
-------------------

RGB → HSV / HSV → RGB:
    rgb_to_hsv(color)
    hsv_to_rgb(h, s, v)
    np_hsv_to_rgb(h, s, v)
        Vectorized, bit-identical to hsv_to_rgb; used by the renderers

RGB → HLS / HLS → RGB:
    rgb_to_hls(color)
    hls_to_rgb(h, l, s)

RGB → CMY / CMY → RGB:
    rgb_to_cmy(color)
    cmy_to_rgb(c, m, y)

RGB → CIE / CIE → RGB:
    rgb_to_cie(color)
    cie_to_rgb(x, y, Y)

High-Level API
-------------
    convert(value, from_space, to_space)

Failure Policy
--------------
No conversion raises on numeric input. Hue is wrapped into [0, 360),
unit-range components are clamped into [0, 1], channels are clamped into
[0, 255] after rounding, and every division is guarded.

Examples
--------
>>> from chromapick.conversions import rgb_to_hsv, hsv_to_rgb
>>> h, s, v = rgb_to_hsv((255, 128, 0))
>>> hsv_to_rgb(h, s, v)
Color(254, 127, 0)
"""

from .to_hsv import rgb_to_hsv
from .to_hls import rgb_to_hls
from .to_cmy import rgb_to_cmy
from .to_cie import rgb_to_cie
from .to_rgb import (
    cie_to_rgb,
    cmy_to_rgb,
    hls_to_rgb,
    hsv_to_rgb,
    np_hsv_to_rgb,
)
from .channels import to_color
from .wrapper import convert

from ..types.color_types import ColorSpace

__all__ = [
    'rgb_to_hsv',
    'hsv_to_rgb',
    'np_hsv_to_rgb',
    'rgb_to_hls',
    'hls_to_rgb',
    'rgb_to_cmy',
    'cmy_to_rgb',
    'rgb_to_cie',
    'cie_to_rgb',
    'to_color',
    'convert',
    'ColorSpace',
]
