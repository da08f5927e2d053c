"""Linear-space RGB framebuffer and its 8-bit gamma encode."""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .vector import Vector3

GAMMA = 2.2


class Framebuffer:
    """Row-major grid of linear RGB values indexed by ``(column, row)``."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def set_pixel(self, column: int, row: int, color: Vector3) -> None:
        self.pixels[row, column] = (color.x, color.y, color.z)

    def pixel(self, column: int, row: int) -> Vector3:
        return Vector3.from_iter(self.pixels[row, column])

    def set_row(self, row: int, colors: Sequence[Vector3]) -> None:
        if len(colors) != self.width:
            raise ValueError(f"Row {row} has {len(colors)} pixels, expected {self.width}")
        self.pixels[row] = [(c.x, c.y, c.z) for c in colors]

    def to_rgb8(self) -> bytes:
        return encode_rgb8(self.pixels).tobytes()


def encode_rgb8(pixels: np.ndarray | Iterable) -> np.ndarray:
    """Gamma encode linear RGB and quantize each channel to ``uint8``.

    Channels are raised to ``1/2.2``, scaled by 255, truncated and then
    clamped to ``[0, 255]``. Non-finite results (negative inputs) map to 0.
    """

    linear = np.asarray(pixels, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        scaled = np.power(linear, 1.0 / GAMMA) * 255.0
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.trunc(scaled), 0.0, 255.0).astype(np.uint8)
