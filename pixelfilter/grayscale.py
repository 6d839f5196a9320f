# grayscale.py
# BT.601 luma conversion

from __future__ import annotations
import logging
import numpy as np

from .buffer import PixelBuffer, require_pixels
from .settings import S

logger = logging.getLogger("pixelfilter.grayscale")


def round_half_up(x: np.ndarray) -> np.ndarray:
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)


def luma_of(rgb: np.ndarray) -> np.ndarray:
    """(H,W,3) uint8 -> (H,W) uint8 weighted sum, rounded half-up in integers."""
    y = rgb.astype(np.int32) @ np.asarray(S.LUMA_PERMILLE, dtype=np.int32)
    return np.clip((y + 500) // 1000, S.BLACK, S.WHITE).astype(np.uint8)


def luma(buffer: PixelBuffer) -> np.ndarray:
    require_pixels(buffer, "luma")
    return luma_of(buffer.to_array())


def grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """
    Return a new buffer of the same size whose R, G and B are all
    round(0.299*R + 0.587*G + 0.114*B) of the source pixel.
    """
    y = luma(buffer)
    logger.debug("grayscale %dx%d", buffer.width, buffer.height)
    return PixelBuffer.from_array(y)
