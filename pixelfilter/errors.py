# errors.py
# precondition failures raised by the filters; nothing here is recovered internally


class PixelFilterError(Exception):
    """Base class for every error raised by pixelfilter."""


class OutOfRangeError(PixelFilterError, ValueError):
    """A strength or threshold parameter lies outside its documented domain."""


class BufferBoundsError(PixelFilterError, ValueError):
    """Declared width/height/stride disagree with the backing storage."""


class EmptyInputError(PixelFilterError, ValueError):
    """A zero-pixel buffer or histogram where pixels are required."""
