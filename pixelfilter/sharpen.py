# sharpen.py
# 5x5 unsharp-style sharpen built on a toroidal (wraparound) convolution
# Dependencies: numpy

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
import logging
import numpy as np

from .buffer import PixelBuffer, require_pixels
from .errors import OutOfRangeError
from .grayscale import round_half_up
from .settings import S

logger = logging.getLogger("pixelfilter.sharpen")

SHARPEN_WEIGHTS = S.SHARPEN_WEIGHTS
LEGACY_SHARPEN_WEIGHTS = S.LEGACY_SHARPEN_WEIGHTS


@dataclass(frozen=True)
class Kernel:
    weights: tuple   # size x size, weights[row][col] = (dy, dx) offset from the centre
    bias: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        w = tuple(tuple(float(v) for v in row) for row in self.weights)
        n = len(w)
        if n == 0 or n % 2 == 0 or any(len(row) != n for row in w):
            raise ValueError(f"kernel must be square with odd size, got {n} rows")
        object.__setattr__(self, "weights", w)

    @property
    def size(self) -> int:
        return len(self.weights)

    @property
    def matrix(self) -> np.ndarray:
        return np.asarray(self.weights, dtype=np.float64)


def sharpen_kernel(strength: float, weights: Sequence[Sequence[float]] = SHARPEN_WEIGHTS) -> Kernel:
    """bias = 1 - strength, scale = strength/16."""
    if not 0.0 <= strength <= 1.0:
        raise OutOfRangeError(f"strength should be between 0 and 1, got {strength}")
    return Kernel(weights=tuple(map(tuple, weights)), bias=1.0 - strength,
                  scale=strength / S.SHARPEN_NORM)


def convolve(buffer: PixelBuffer, kernel: Kernel) -> PixelBuffer:
    """
    Apply `kernel` to every channel independently with wraparound borders:
      acc = sum_{dy,dx} src[(y-r+dy) mod H, (x-r+dx) mod W] * w[dy][dx]
      out = clamp(round(scale*acc + bias), 0, 255)
    The source is read in full before the output array is written, and the
    input buffer is never modified.
    """
    require_pixels(buffer, "convolve")
    src = buffer.to_array().astype(np.float64)
    H, W = buffer.shape
    r = kernel.size // 2
    w = kernel.matrix
    ys = np.arange(H); xs = np.arange(W)

    acc = np.zeros_like(src)
    for dy in range(kernel.size):
        rows = (ys - r + dy) % H
        for dx in range(kernel.size):
            if w[dy, dx] == 0: continue
            cols = (xs - r + dx) % W
            acc += w[dy, dx] * src[rows][:, cols]

    out = np.clip(round_half_up(kernel.scale * acc + kernel.bias), 0, 255).astype(np.uint8)
    return PixelBuffer.from_array(out)


def sharpen(buffer: PixelBuffer, strength: float,
            weights: Sequence[Sequence[float]] = SHARPEN_WEIGHTS) -> PixelBuffer:
    """
    Sharpen an RGB buffer; strength in [0,1] (0 leaves every channel at the bias
    value 1, 1 applies the full kernel). Returns a new buffer.
    """
    kernel = sharpen_kernel(strength, weights)
    logger.debug("sharpen %dx%d strength=%.3f", buffer.width, buffer.height, strength)
    return convolve(buffer, kernel)
