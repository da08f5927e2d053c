"""Binary portable pixmap (P6) output."""
from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from .framebuffer import Framebuffer

PathLike = Union[str, Path]


def ppm_header(width: int, height: int) -> bytes:
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def encode_ppm(framebuffer: Framebuffer) -> bytes:
    return ppm_header(framebuffer.width, framebuffer.height) + framebuffer.to_rgb8()


def write_ppm(path: PathLike, framebuffer: Framebuffer) -> Path:
    """Write ``framebuffer`` as a P6 image, top row first."""

    target = Path(path)
    target.write_bytes(encode_ppm(framebuffer))
    return target


def read_ppm(path: PathLike) -> Tuple[int, int, bytes]:
    """Parse a file written by :func:`write_ppm` into ``(width, height, rgb)``."""

    data = Path(path).read_bytes()
    parts = data.split(b"\n", 3)
    if len(parts) != 4 or parts[0] != b"P6":
        raise ValueError("Only binary PPM (P6) is supported")
    try:
        width, height = (int(token) for token in parts[1].split())
        max_value = int(parts[2])
    except ValueError as exc:
        raise ValueError("Invalid PPM header") from exc
    if width <= 0 or height <= 0:
        raise ValueError("Invalid PPM dimensions")
    if max_value != 255:
        raise ValueError("Unsupported PPM max value")
    rgb = parts[3]
    if len(rgb) != width * height * 3:
        raise ValueError("PPM pixel data does not match dimensions")
    return width, height, rgb
