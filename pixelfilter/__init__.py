# pixelfilter/__init__.py

# Errors
from .errors import (
    PixelFilterError,
    OutOfRangeError,
    BufferBoundsError,
    EmptyInputError,
)

# Buffers & settings
from .buffer import PixelBuffer
from .settings import Settings, S

# Filters
from .grayscale import grayscale, luma
from .histogram import Histogram, build_histogram, otsu_threshold
from .binarise import binarize, adaptive_binarize, strength_to_level
from .sharpen import (
    Kernel,
    SHARPEN_WEIGHTS,
    LEGACY_SHARPEN_WEIGHTS,
    sharpen_kernel,
    convolve,
    sharpen,
)

# I/O
from .io_save_load import load_rgb, save_rgb

__version__ = "0.1.0"
