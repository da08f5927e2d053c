"""Tests for the framebuffer and P6 encoding."""
from __future__ import annotations

import numpy as np
import pytest

from explosion_sandbox.framebuffer import Framebuffer, encode_rgb8
from explosion_sandbox.ppm import encode_ppm, ppm_header, read_ppm, write_ppm
from explosion_sandbox.vector import Vector3


def test_encode_clamps_and_truncates():
    encoded = encode_rgb8([[0.0, 1.0, 4.0], [-1.0, float("nan"), float("inf")]])
    assert encoded.dtype == np.uint8
    assert encoded.tolist() == [[0, 255, 255], [0, 0, 255]]


def test_encode_applies_gamma():
    linear = 0.5 ** 2.2
    value = int(encode_rgb8([linear])[0])
    assert value in (126, 127)


def test_framebuffer_is_row_major():
    fb = Framebuffer(2, 2)
    fb.set_pixel(1, 0, Vector3(1.0, 0.0, 0.0))
    fb.set_row(1, [Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, 1.0)])
    assert fb.pixel(1, 0) == Vector3(1.0, 0.0, 0.0)
    assert fb.to_rgb8() == bytes([0, 0, 0, 255, 0, 0, 0, 255, 0, 0, 0, 255])


def test_framebuffer_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Framebuffer(0, 3)
    fb = Framebuffer(3, 1)
    with pytest.raises(ValueError):
        fb.set_row(0, [Vector3.zero()])


def test_ppm_round_trip(tmp_path):
    fb = Framebuffer(3, 2)
    fb.set_pixel(2, 1, Vector3(1.0, 1.0, 1.0))
    path = write_ppm(tmp_path / "image.ppm", fb)
    width, height, rgb = read_ppm(path)
    assert (width, height) == (3, 2)
    assert rgb == fb.to_rgb8()
    assert path.read_bytes().startswith(ppm_header(3, 2))
    assert encode_ppm(fb) == path.read_bytes()


@pytest.mark.parametrize(
    "payload",
    [b"P3\n1 1\n255\n\x00\x00\x00", b"P6\n1 1\n65535\n\x00\x00\x00", b"P6\n2 1\n255\n\x00\x00\x00", b"P6\nx y\n255\n"],
)
def test_read_ppm_rejects_malformed_files(tmp_path, payload):
    path = tmp_path / "bad.ppm"
    path.write_bytes(payload)
    with pytest.raises(ValueError):
        read_ppm(path)
