from ..types.color_types import CMY
from .channels import ColorLike, rgb_channels


def rgb_to_cmy(color: ColorLike) -> CMY:
    r, g, b = rgb_channels(color)
    return CMY(255 - r, 255 - g, 255 - b)
