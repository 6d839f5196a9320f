# settings.py
# Tunable constants (one place)

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    # ITU-R BT.601 luma weights (R, G, B) 0.299/0.587/0.114, in thousandths
    # so rounding is exact integer arithmetic
    LUMA_PERMILLE: tuple = (299, 587, 114)

    # 8-bit levels
    LEVELS: int = 256
    BLACK: int = 0
    WHITE: int = 255

    # 5x5 unsharp-style kernel, centre-normalised by SHARPEN_NORM
    SHARPEN_WEIGHTS: tuple = (
        ( 0, -1, -1, -1,  0),
        (-1,  2,  2,  2, -1),
        (-1,  2, 16,  2, -1),
        (-1,  2,  2,  2, -1),
        ( 0, -1, -1, -1,  0),
    )
    # earlier revision: corners -1, weights sum to 16
    LEGACY_SHARPEN_WEIGHTS: tuple = (
        (-1, -1, -1, -1, -1),
        (-1,  2,  2,  2, -1),
        (-1,  2, 16,  2, -1),
        (-1,  2,  2,  2, -1),
        (-1, -1, -1, -1, -1),
    )
    SHARPEN_NORM: float = 16.0

S = Settings()
