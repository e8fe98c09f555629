from typing import TypeAlias
import numpy as np

# (height, width, 4) uint8, RGBA byte order, straight alpha
PixelBuffer: TypeAlias = np.ndarray

BYTES_PER_PIXEL = 4
