# binarise.py
# fixed & Otsu-adaptive thresholding to pure black/white

from __future__ import annotations
import logging
import numpy as np

from .buffer import PixelBuffer, require_pixels
from .errors import OutOfRangeError
from .grayscale import grayscale, luma_of, round_half_up
from .histogram import build_histogram, otsu_threshold
from .settings import S

logger = logging.getLogger("pixelfilter.binarise")


def strength_to_level(strength: float) -> int:
    """Fractional strength in [0,1] -> integer cut level round(strength*255)."""
    if not 0.0 <= strength <= 1.0:
        raise OutOfRangeError(f"strength should be between 0 and 1, got {strength}")
    return int(round_half_up(strength * S.WHITE))


def _check_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, (int, np.integer)):
        raise TypeError(f"threshold level must be an int, got {level!r}")
    if not S.BLACK <= level <= S.WHITE:
        raise OutOfRangeError(f"threshold level should be between 0 and 255, got {level}")
    return int(level)


def binarize(buffer: PixelBuffer, level: int | None = None, *, strength: float | None = None) -> PixelBuffer:
    """
    Pixels whose luma is <= the cut level become (0,0,0), the rest (255,255,255).
    Args:
        level: explicit integer cut level in [0,255]; a float passed here is
            taken as a strength.
        strength: fractional cut in [0,1], mapped to round(strength*255).
    Exactly one of the two must be given. Range errors are raised before
    the buffer is touched.
    """
    if (level is None) == (strength is None):
        raise ValueError("pass exactly one of level or strength")
    if isinstance(level, (float, np.floating)):
        level, strength = None, float(level)
    t = strength_to_level(strength) if strength is not None else _check_level(level)

    require_pixels(buffer, "binarize")
    y = luma_of(buffer.to_array())
    bw = np.where(y <= t, S.BLACK, S.WHITE).astype(np.uint8)
    logger.debug("binarize %dx%d at level %d", buffer.width, buffer.height, t)
    return PixelBuffer.from_array(bw)


def adaptive_binarize(buffer: PixelBuffer) -> PixelBuffer:
    """Grayscale, pick the Otsu level from its histogram, then binarize at it."""
    gray = grayscale(buffer)
    t = otsu_threshold(build_histogram(gray), gray.size)
    return binarize(gray, t)
