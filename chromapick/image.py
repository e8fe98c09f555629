"""Pillow export of rendered selector buffers."""
from __future__ import annotations

import logging
import os
from typing import Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .selectors.base import ColorSelector
from .types.array_types import BYTES_PER_PIXEL

logger = logging.getLogger(__name__)


def to_image(buffer: NDArray) -> Image.Image:
    """
    Wrap an (h, w, 4) RGBA buffer as a Pillow image.

    Raises:
        ValueError: If the buffer is not (h, w, 4)
    """
    arr = np.asarray(buffer)
    if arr.ndim != 3 or arr.shape[2] != BYTES_PER_PIXEL:
        raise ValueError(f"Expected an (h, w, {BYTES_PER_PIXEL}) buffer, got shape {arr.shape}")
    # an (h, w, 4) uint8 array maps to RGBA
    return Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))


def save_image(
    selector: ColorSelector,
    path: Union[str, os.PathLike],
    include_cursors: bool = True,
) -> Image.Image:
    """Render ``selector`` and save it to ``path``; the format follows the extension."""
    img = to_image(selector.render(include_cursors=include_cursors))
    img.save(path)
    logger.debug("saved %s (%dx%d) to %s", type(selector).__name__, img.width, img.height, path)
    return img
