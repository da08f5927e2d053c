"""Damped sphere tracing and finite-difference normals."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .sdf import DEFAULT_FIELD, SPHERE_RADIUS
from .vector import Vector3

DistanceField = Callable[[Vector3], float]

MAX_STEPS = 128
# Fraction of the distance estimate taken per step; the field is not exact.
STEP_DAMPING = 0.1
MIN_STEP = 0.01
NORMAL_EPSILON = 0.1


@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3


def _bounding_radius(field: DistanceField, override: Optional[float]) -> float:
    if override is not None:
        return override
    return float(getattr(field, "bounding_radius", SPHERE_RADIUS))


def sphere_trace(
    origin: Vector3,
    direction: Vector3,
    field: DistanceField = DEFAULT_FIELD,
    *,
    bounding_radius: Optional[float] = None,
) -> Optional[Vector3]:
    """March ``origin + t * direction`` until the field turns negative.

    ``direction`` must be unit length. Rays whose closest approach to the
    origin lies outside the bounding sphere are rejected without sampling
    the field. The first sample found inside the surface is returned as
    is, without refinement. ``None`` means the ray missed or the step
    budget ran out.
    """

    radius = _bounding_radius(field, bounding_radius)
    along = origin.dot(direction)
    if origin.dot(origin) - along * along > radius * radius:
        return None

    pos = origin
    for _ in range(MAX_STEPS):
        d = field(pos)
        if d < 0.0:
            return pos
        # Large steps far from the surface, never less than MIN_STEP.
        pos = pos + direction * max(d * STEP_DAMPING, MIN_STEP)
    return None


def trace_ray(ray: Ray, field: DistanceField = DEFAULT_FIELD) -> Optional[Vector3]:
    return sphere_trace(ray.origin, ray.direction, field)


def surface_normal(
    pos: Vector3,
    field: DistanceField = DEFAULT_FIELD,
    epsilon: float = NORMAL_EPSILON,
) -> Vector3:
    """Forward-difference gradient of ``field`` at ``pos``, normalized.

    The result is quite sensitive to ``epsilon``.
    """

    d = field(pos)
    nx = field(pos + Vector3(epsilon, 0.0, 0.0)) - d
    ny = field(pos + Vector3(0.0, epsilon, 0.0)) - d
    nz = field(pos + Vector3(0.0, 0.0, epsilon)) - d
    return Vector3(nx, ny, nz).normalized()
