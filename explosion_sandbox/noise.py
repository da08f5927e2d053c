"""Deterministic value noise and the fractal density field built on it."""
from __future__ import annotations

import math
from typing import Tuple

from .vector import Vector3

# Lattice strides used to fold a 3D cell into one scalar index.
LATTICE_STRIDES = Vector3(1.0, 57.0, 113.0)

# Orthonormal basis change applied before summing octaves.
ROTATION: Tuple[Vector3, Vector3, Vector3] = (
    Vector3(0.0, 0.8, 0.6),
    Vector3(-0.8, 0.36, -0.48),
    Vector3(-0.6, -0.48, 0.64),
)

OCTAVE_WEIGHTS: Tuple[float, ...] = (0.50, 0.25, 0.125, 0.0625)
# Cumulative position multipliers applied between consecutive octaves.
OCTAVE_SCALES: Tuple[float, ...] = (2.32, 3.03, 2.61)
OCTAVE_NORMALIZER = 0.9375


# -- Hash helpers ---------------------------------------------------------

def hash1(n: float) -> float:
    """Map a lattice index to a pseudo-random value in ``[0, 1)``."""

    x = math.sin(n) * 43758.5453
    return x - math.floor(x)


def _fade(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def lerp(a, b, t: float):
    """Linear interpolation with ``t`` clamped to ``[0, 1]``.

    Works for floats and :class:`Vector3` alike.
    """

    t = min(max(t, 0.0), 1.0)
    return a * (1.0 - t) + b * t


# -- Noise evaluators -----------------------------------------------------

def noise(p: Vector3) -> float:
    """Trilinearly interpolated value noise in ``[0, 1)``."""

    cell = Vector3(math.floor(p.x), math.floor(p.y), math.floor(p.z))
    f = p - cell
    u = _fade(f.x)
    v = _fade(f.y)
    w = _fade(f.z)
    n = cell.dot(LATTICE_STRIDES)

    x1 = lerp(hash1(n + 0.0), hash1(n + 1.0), u)
    x2 = lerp(hash1(n + 57.0), hash1(n + 58.0), u)
    x3 = lerp(hash1(n + 113.0), hash1(n + 114.0), u)
    x4 = lerp(hash1(n + 170.0), hash1(n + 171.0), u)

    y1 = lerp(x1, x2, v)
    y2 = lerp(x3, x4, v)

    return lerp(y1, y2, w)


def rotate(v: Vector3) -> Vector3:
    return Vector3(ROTATION[0].dot(v), ROTATION[1].dot(v), ROTATION[2].dot(v))


def fbm(v: Vector3) -> float:
    """Four octaves of :func:`noise` over a rotated domain.

    The octave weights and the irregular scale factors are fixed; the
    result is normalized by the weight sum so it stays in ``[0, 1)``.
    This field has visible directional artifacts and is kept as is.
    """

    p = rotate(v)
    total = 0.0
    for octave, weight in enumerate(OCTAVE_WEIGHTS):
        total += weight * noise(p)
        if octave < len(OCTAVE_SCALES):
            p = p * OCTAVE_SCALES[octave]
    return total / OCTAVE_NORMALIZER
