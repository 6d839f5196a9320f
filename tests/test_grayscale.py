import math
from fractions import Fraction

import numpy as np
import pytest

from pixelfilter import PixelBuffer, grayscale, luma

W_R, W_G, W_B = Fraction("0.299"), Fraction("0.587"), Fraction("0.114")


def _exact_luma(r, g, b):
    return math.floor(W_R * r + W_G * g + W_B * b + Fraction(1, 2))


@pytest.mark.parametrize("rgb,expected", [
    ((255, 0, 0), 76),
    ((0, 255, 0), 150),
    ((0, 0, 255), 29),
    ((255, 255, 255), 255),
    ((0, 0, 0), 0),
    ((10, 20, 30), 18),
    # exact halves round up
    ((0, 36, 12), 23),
    ((0, 80, 110), 60),
    ((0, 0, 250), 29),
])
def test_bt601_weights(rgb, expected):
    out = grayscale(PixelBuffer.blank(1, 1, fill=rgb))
    assert out.get_pixel(0, 0) == (expected, expected, expected)


def test_matches_per_pixel_formula(padded_buffer):
    out = grayscale(padded_buffer)
    for row in range(padded_buffer.height):
        for col in range(padded_buffer.width):
            got = out.get_pixel(row, col)
            assert got[0] == got[1] == got[2]
            assert got[0] == _exact_luma(*padded_buffer.get_pixel(row, col))


def test_every_halfway_green_blue_pair_rounds_up():
    g, b = np.meshgrid(np.arange(256), np.arange(256), indexing="ij")
    hits = np.argwhere((587 * g + 114 * b) % 1000 == 500)
    assert len(hits) > 0
    arr = np.zeros((1, len(hits), 3), dtype=np.uint8)
    arr[0, :, 1] = hits[:, 0]
    arr[0, :, 2] = hits[:, 1]
    y = luma(PixelBuffer.from_array(arr))[0]
    for (gg, bb), got in zip(hits.tolist(), y.tolist()):
        assert got == _exact_luma(0, gg, bb)


def test_idempotent(rgb_buffer):
    once = grayscale(rgb_buffer)
    assert grayscale(once) == once


def test_preserves_dimensions_and_input(padded_buffer):
    before = bytes(padded_buffer.pixels)
    out = grayscale(padded_buffer)
    assert out.shape == padded_buffer.shape
    assert out.stride == out.width * 3
    assert bytes(padded_buffer.pixels) == before


def test_luma_plane(rgb_buffer):
    y = luma(rgb_buffer)
    assert y.shape == (rgb_buffer.height, rgb_buffer.width)
    assert y.dtype == np.uint8
    np.testing.assert_array_equal(y, grayscale(rgb_buffer).to_array()[:, :, 0])
