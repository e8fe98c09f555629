from .num_utils import (
    HUE_360,
    adjust_360,
    clamp_channel,
    ensure_range,
    fadjust,
    normalize_pair,
    normalize_rect,
    trunc_div,
    valid_index,
)

__all__ = [
    "HUE_360",
    "adjust_360",
    "clamp_channel",
    "ensure_range",
    "fadjust",
    "normalize_pair",
    "normalize_rect",
    "trunc_div",
    "valid_index",
]
