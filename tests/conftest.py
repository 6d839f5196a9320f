import numpy as np
import pytest

from pixelfilter import PixelBuffer


@pytest.fixture
def rgb_buffer():
    """Small deterministic colour image, odd sizes so rows and columns differ."""
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(7, 9, 3), dtype=np.uint8)
    return PixelBuffer.from_array(arr)


@pytest.fixture
def padded_buffer():
    """Same kind of image but with 5 bytes of row padding."""
    rng = np.random.default_rng(99)
    arr = rng.integers(0, 256, size=(6, 4, 3), dtype=np.uint8)
    return PixelBuffer.from_array(arr, stride=4 * 3 + 5)


@pytest.fixture
def uniform():
    """Factory for flat images where every channel of every pixel equals `value`."""
    def _make(value, width=6, height=5):
        return PixelBuffer.blank(width, height, fill=(value, value, value))
    return _make
