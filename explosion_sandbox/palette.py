"""Fire palette and per-pixel shading of the explosion."""
from __future__ import annotations

from typing import Optional

from .noise import lerp
from .sdf import DEFAULT_FIELD, NOISE_AMPLITUDE, SPHERE_RADIUS
from .tracer import DistanceField, sphere_trace, surface_normal
from .vector import Vector3


def _rgb8(r: int, g: int, b: int) -> Vector3:
    return Vector3(r / 255.0, g / 255.0, b / 255.0)


# Gradient stops, from the coolest (d = 0) to the hottest (d = 1).
GRAY = _rgb8(248, 243, 239)
DARKGRAY = _rgb8(209, 209, 211)
RED = _rgb8(131, 157, 190)
ORANGE = _rgb8(100, 143, 185)
YELLOW = _rgb8(66, 122, 169)

LIGHT_POSITION = Vector3(10.0, 10.0, 10.0)
AMBIENT_FLOOR = 0.4
# Stored in linear space so the final gamma encode restores (0.2, 0.7, 0.8).
BACKGROUND = Vector3(0.2 ** 2.2, 0.7 ** 2.2, 0.8 ** 2.2)


def palette_fire(d: float) -> Vector3:
    """Piecewise-linear gray, darkgray, red, orange, yellow gradient.

    ``d`` is clamped to ``[0, 1]``; each quarter blends two stops.
    """

    x = min(max(d, 0.0), 1.0)
    if x < 0.25:
        return lerp(GRAY, DARKGRAY, x * 4.0)
    if x < 0.5:
        return lerp(DARKGRAY, RED, x * 4.0 - 1.0)
    if x < 0.75:
        return lerp(RED, ORANGE, x * 4.0 - 2.0)
    return lerp(ORANGE, YELLOW, x * 4.0 - 3.0)


def shade_hit(
    hit: Vector3,
    field: DistanceField = DEFAULT_FIELD,
    light_position: Vector3 = LIGHT_POSITION,
) -> Vector3:
    """Color of a surface point: depth into the noise, lit by one point light."""

    radius = getattr(field, "sphere_radius", SPHERE_RADIUS)
    amplitude = getattr(field, "noise_amplitude", NOISE_AMPLITUDE)
    noise_level = (radius - hit.length()) / amplitude
    light_dir = (light_position - hit).normalized()
    intensity = max(light_dir.dot(surface_normal(hit, field)), AMBIENT_FLOOR)
    return palette_fire((noise_level - 0.2) * 2.0) * intensity


def shade_ray(
    origin: Vector3,
    direction: Vector3,
    field: DistanceField = DEFAULT_FIELD,
) -> Vector3:
    hit: Optional[Vector3] = sphere_trace(origin, direction, field)
    if hit is None:
        return BACKGROUND
    return shade_hit(hit, field)
