"""Conversions from HSV, HLS, CMY and CIE xyY into 8-bit RGB."""

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import Color
from ..utils.num_utils import HUE_360, adjust_360, clamp_channel, ensure_range

# Row per hue sector: indices into (P0, P1, P2, P3) for R, G, B
SECTOR_TABLE = (
    (0, 3, 1),
    (2, 0, 1),
    (1, 0, 3),
    (1, 2, 0),
    (3, 1, 0),
    (0, 1, 2),
)
_SECTOR_INDEX = np.array(SECTOR_TABLE, dtype=np.intp)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """
    Convert HSV to an opaque RGB color using the 6-sector hexagonal model.

    Args:
        hue: Hue in degrees, wrapped into [0, 360)
        saturation: Saturation, clamped into [0, 1]
        value: Value, clamped into [0, 1]

    Returns:
        Color with alpha 255
    """
    hue = adjust_360(hue)
    saturation = ensure_range(saturation, 0.0, 1.0)
    value = ensure_range(value, 0.0, 1.0)

    if saturation == 0:
        p0 = clamp_channel(round(value * 255))
        return Color(p0, p0, p0)

    hue /= 60
    hi = int(hue) % 6
    hf = hue - int(hue)

    p0 = round(value * 255)
    p1 = round(p0 * (1 - saturation))
    p2 = round(p0 * (1 - (saturation * hf)))
    p3 = round(p0 * (1 - (saturation * (1 - hf))))

    p = (p0, p1, p2, p3)
    ri, gi, bi = SECTOR_TABLE[hi]
    return Color(p[ri], p[gi], p[bi])


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB, bit-identical to :func:`hsv_to_rgb`.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation
        v: array-like or scalar, value

    Returns:
        uint8 array of shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.clip(np.broadcast_to(s, out_shape), 0.0, 1.0)
    v = np.clip(np.broadcast_to(v, out_shape), 0.0, 1.0)

    h = np.fmod(h, HUE_360)
    h = np.where(h < 0, h + HUE_360, h)
    h = np.where(h >= HUE_360, 0.0, h)

    h = h / 60
    h_int = np.trunc(h)
    hi = h_int.astype(np.intp) % 6
    hf = h - h_int

    p0 = np.round(v * 255)
    p1 = np.round(p0 * (1 - s))
    p2 = np.round(p0 * (1 - (s * hf)))
    p3 = np.round(p0 * (1 - (s * (1 - hf))))

    p = np.stack([p0, p1, p2, p3], axis=-1)
    rgb = np.take_along_axis(p, _SECTOR_INDEX[hi], axis=-1)

    # zero saturation is a gray of P0
    rgb = np.where((s == 0)[..., None], p0[..., None], rgb)
    return np.clip(rgb, 0, 255).astype(np.uint8)


def hls_to_rgb(hue: float, lightness: float, saturation: float) -> Color:
    """
    Convert HLS to an opaque RGB color.

    The chroma bounds are evaluated by a hue-shifted helper at H+120 (red),
    H (green) and H-120 (blue).
    """
    hue = adjust_360(hue)
    lightness = ensure_range(lightness, 0.0, 1.0)
    saturation = ensure_range(saturation, 0.0, 1.0)

    if lightness > 0.5:
        c_max = lightness * (1 - saturation) + saturation
        c_min = 2 * lightness - c_max
    else:
        c_min = lightness * (1 - saturation)
        c_max = 2 * lightness - c_min

    diff = c_max - c_min

    def hue_to_channel(h: float) -> int:
        h = adjust_360(h)
        v = c_min

        if h < 60:
            v = c_min + diff * h / 60

        if 60 <= h < 180:
            v = c_max

        if 180 <= h < 240:
            v = c_min + diff * (240 - h) / 60

        return clamp_channel(round(v * 255))

    return Color(
        hue_to_channel(hue + 120),
        hue_to_channel(hue),
        hue_to_channel(hue - 120),
    )


def cmy_to_rgb(cyan: int, magenta: int, yellow: int) -> Color:
    return Color(255 - cyan, 255 - magenta, 255 - yellow)


def cie_to_rgb(x: float, y: float, luminance: float) -> Color:
    """
    Convert CIE chromaticity (x, y) and luminance Y to device RGB.

    ``y <= 0`` has no defined color and yields white. Negative ``x`` and
    luminance are clamped to 0.
    """
    r = g = b = 255

    if y > 0:
        x = max(x, 0.0)
        luminance = max(luminance, 0.0)

        xzy = x * luminance / y
        xyzy = (1 - x - y) * luminance / y

        r = round(
            (
                2.739386694386690 * xzy -
                1.144708939708940 * luminance -
                0.424074844074844 * xyzy
            ) * 255
        )
        g = round(
            (
                -1.118985713198160 * xzy +
                2.028500773974170 * luminance +
                0.033144618976324 * xyzy
            ) * 255
        )
        b = round(
            (
                0.137976247723133 * xzy -
                0.333450588949605 * luminance +
                1.104800777170610 * xyzy
            ) * 255
        )

    return Color(clamp_channel(r), clamp_channel(g), clamp_channel(b))
