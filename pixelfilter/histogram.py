# histogram.py
# 256-bin intensity histogram & Otsu threshold selection

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple
import logging
import numpy as np

from .buffer import PixelBuffer, require_pixels
from .errors import EmptyInputError
from .settings import S

logger = logging.getLogger("pixelfilter.histogram")


@dataclass(frozen=True)
class Histogram:
    counts: Tuple[int, ...]   # index = intensity level 0..255

    def __post_init__(self):
        counts = tuple(int(c) for c in self.counts)
        if len(counts) != S.LEVELS:
            raise ValueError(f"histogram needs {S.LEVELS} bins, got {len(counts)}")
        if any(c < 0 for c in counts):
            raise ValueError("histogram counts must be non-negative")
        object.__setattr__(self, "counts", counts)

    @property
    def total(self) -> int:
        return sum(self.counts)

    @classmethod
    def from_counts(cls, counts: Sequence[int]) -> "Histogram":
        return cls(tuple(counts))


def build_histogram(buffer: PixelBuffer) -> Histogram:
    """
    Count every pixel once, binned by its R channel. The buffer is expected
    to be grayscale already (R == G == B).
    """
    require_pixels(buffer, "histogram")
    red = buffer.to_array()[:, :, 0]
    hist = np.bincount(red.ravel(), minlength=S.LEVELS)
    return Histogram(tuple(hist.tolist()))


def otsu_threshold(histogram: Histogram, total_pixels: int | None = None) -> int:
    """
    Level that maximises the between-class variance wB*wF*(mB-mF)^2.
    Pixels <= the returned level form the background class. The first
    maximum wins (strict >), so the result is a single deterministic level.
    If every pixel sits in one bin there is no split; that bin is returned.
    """
    hist = histogram.counts
    total = histogram.total if total_pixels is None else int(total_pixels)
    if total <= 0:
        raise EmptyInputError("otsu: no pixels to threshold")

    sum_total = sum(i * c for i, c in enumerate(hist))
    sumB = wB = 0
    var_max = -1.0; thr = None
    for t in range(S.LEVELS):
        wB += hist[t]
        sumB += t * hist[t]
        if wB == 0: continue
        wF = total - wB
        if wF <= 0: break
        mB = sumB / wB;  mF = (sum_total - sumB) / wF
        var_between = wB * wF * (mB - mF) ** 2
        if var_between > var_max: var_max, thr = var_between, t

    if thr is None:
        # single populated level
        thr = next((i for i, c in enumerate(hist) if c), 0)
    logger.debug("otsu threshold %d (between-class variance %.3f)", thr, var_max)
    return thr
