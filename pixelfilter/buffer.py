# buffer.py
# packed 8-bit RGB raster with explicit row stride

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .errors import BufferBoundsError, EmptyInputError

RGB = Tuple[int, int, int]


@dataclass
class PixelBuffer:
    """
    Packed R,G,B triplets, row-major, `stride` bytes per row (stride >= width*3
    leaves room for row padding). Filters read through this and always return
    a new buffer; the one they were handed is left alone.
    """
    width: int
    height: int
    stride: int
    pixels: bytearray

    def __post_init__(self):
        if not isinstance(self.pixels, bytearray):
            self.pixels = bytearray(self.pixels)
        self.validate()

    # --- invariants ----------------------------------------------------------

    def validate(self) -> None:
        """Raise BufferBoundsError unless every pixel address lies inside `pixels`."""
        for name in ("width", "height", "stride"):
            v = getattr(self, name)
            if not isinstance(v, (int, np.integer)) or isinstance(v, bool):
                raise BufferBoundsError(f"{name} must be an int, got {v!r}")
            if v < 0:
                raise BufferBoundsError(f"{name} must be >= 0, got {v}")
        if self.stride < self.width * 3:
            raise BufferBoundsError(
                f"stride {self.stride} shorter than a row of {self.width} RGB pixels")
        need = self.stride * self.height
        if len(self.pixels) < need:
            raise BufferBoundsError(
                f"{self.width}x{self.height} buffer with stride {self.stride} needs "
                f"{need} bytes, backing storage holds {len(self.pixels)}")

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    # --- addressing ----------------------------------------------------------

    def offset(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row},{col}) outside {self.width}x{self.height}")
        return row * self.stride + 3 * col

    def get_pixel(self, row: int, col: int) -> RGB:
        i = self.offset(row, col)
        r, g, b = self.pixels[i:i + 3]
        return r, g, b

    def set_pixel(self, row: int, col: int, rgb: RGB) -> None:
        i = self.offset(row, col)
        self.pixels[i:i + 3] = bytes(rgb)

    # --- construction / conversion -------------------------------------------

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.stride, bytearray(self.pixels))

    def to_array(self) -> np.ndarray:
        """(H, W, 3) uint8 copy of the pixel data, row padding stripped."""
        h, w = self.shape
        if h == 0 or w == 0:
            return np.zeros((h, w, 3), dtype=np.uint8)
        rows = np.frombuffer(self.pixels, dtype=np.uint8, count=self.stride * h)
        rows = rows.reshape(h, self.stride)[:, :w * 3]
        return rows.reshape(h, w, 3).copy()

    @classmethod
    def from_array(cls, arr: np.ndarray, stride: int | None = None) -> "PixelBuffer":
        """
        Build a buffer from an (H, W, 3) RGB or (H, W) single-channel uint8 array.
        Single-channel input is replicated into all three channels.
        Args:
            arr: pixel array; values outside uint8 are rejected.
            stride: row length in bytes (defaults to W*3, i.e. no padding).
        """
        arr = np.asarray(arr)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise BufferBoundsError(f"expected (H,W,3) or (H,W) array, got shape {arr.shape}")
        if arr.dtype != np.uint8:
            raise BufferBoundsError(f"expected uint8 pixels, got {arr.dtype}")
        h, w = arr.shape[:2]
        if stride is None:
            stride = w * 3
        if stride < w * 3:
            raise BufferBoundsError(f"stride {stride} shorter than a row of {w} RGB pixels")
        packed = np.zeros((h, stride), dtype=np.uint8)
        packed[:, :w * 3] = arr.reshape(h, w * 3)
        return cls(width=w, height=h, stride=stride, pixels=bytearray(packed.tobytes()))

    @classmethod
    def blank(cls, width: int, height: int, fill: RGB = (0, 0, 0)) -> "PixelBuffer":
        return cls(width=width, height=height, stride=width * 3,
                   pixels=bytearray(bytes(fill) * (width * height)))


def require_pixels(buffer: PixelBuffer, op: str) -> None:
    """Shared precondition: consistent bounds and at least one pixel."""
    buffer.validate()
    if buffer.size == 0:
        raise EmptyInputError(f"{op}: buffer has no pixels ({buffer.width}x{buffer.height})")
