from typing import Any, Callable, Dict, Sequence, Union

from ..colors.color import Color
from ..types.color_types import CIE, CMY, HLS, HSV, ColorSpace
from .channels import to_color
from .to_cie import rgb_to_cie
from .to_cmy import rgb_to_cmy
from .to_hls import rgb_to_hls
from .to_hsv import rgb_to_hsv
from .to_rgb import cie_to_rgb, cmy_to_rgb, hls_to_rgb, hsv_to_rgb

ColorValue = Union[Color, HSV, HLS, CMY, CIE, Sequence[float]]

FROM_RGB: Dict[ColorSpace, Callable[[Color], Any]] = {
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HLS: rgb_to_hls,
    ColorSpace.CMY: rgb_to_cmy,
    ColorSpace.CIE: rgb_to_cie,
}

TO_RGB: Dict[ColorSpace, Callable[..., Color]] = {
    ColorSpace.HSV: hsv_to_rgb,
    ColorSpace.HLS: hls_to_rgb,
    ColorSpace.CMY: cmy_to_rgb,
    ColorSpace.CIE: cie_to_rgb,
}

TUPLE_TYPES: Dict[ColorSpace, type] = {
    ColorSpace.HSV: HSV,
    ColorSpace.HLS: HLS,
    ColorSpace.CMY: CMY,
    ColorSpace.CIE: CIE,
}


def _space(name: Union[ColorSpace, str]) -> ColorSpace:
    try:
        return ColorSpace(str(getattr(name, "value", name)).lower())
    except ValueError:
        raise ValueError(f"Unknown space: {name}") from None


def _to_rgb(value: ColorValue, space: ColorSpace) -> Color:
    if space is ColorSpace.RGB:
        return to_color(value)  # type: ignore[arg-type]
    return TO_RGB[space](*value)  # type: ignore[misc]


def convert(
    value: ColorValue,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> ColorValue:
    """
    Convert a color value between RGB, HSV, HLS, CMY and CIE xyY.

    Conversions that touch neither side as RGB go through RGB.

    Args:
        value: Color (or (r, g, b)) for "rgb", otherwise a 3-tuple in the
            source space
        from_space: Source color space name
        to_space: Target color space name

    Returns:
        Color for "rgb", otherwise the named tuple of the target space
    """
    fs, ts = _space(from_space), _space(to_space)

    if fs is ts:
        if fs is ColorSpace.RGB:
            return to_color(value)  # type: ignore[arg-type]
        return TUPLE_TYPES[fs](*value)  # No conversion needed

    rgb = _to_rgb(value, fs)
    if ts is ColorSpace.RGB:
        return rgb
    return FROM_RGB[ts](rgb)

