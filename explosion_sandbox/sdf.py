"""Signed distance field of the noise-perturbed explosion sphere."""
from __future__ import annotations

from dataclasses import dataclass

from .noise import fbm
from .vector import Vector3

# The whole explosion fits in a sphere of this radius centred at the origin.
SPHERE_RADIUS = 1.5
# Depth the noise may push the surface towards the centre.
NOISE_AMPLITUDE = 1.0
NOISE_FREQUENCY = 3.4


@dataclass(frozen=True)
class ExplosionField:
    """Sphere whose radius is shrunk by fractal noise.

    The value is negative inside the perturbed surface and positive
    outside. Once noise is applied it is only a bound on the distance,
    not a true Euclidean metric.
    """

    sphere_radius: float = SPHERE_RADIUS
    noise_amplitude: float = NOISE_AMPLITUDE
    noise_frequency: float = NOISE_FREQUENCY

    @property
    def bounding_radius(self) -> float:
        # fbm is non-negative so displacement only ever moves inwards.
        return self.sphere_radius

    def evaluate(self, point: Vector3) -> float:
        displacement = fbm(point * self.noise_frequency) * self.noise_amplitude
        return point.length() - (self.sphere_radius - displacement)

    def __call__(self, point: Vector3) -> float:
        return self.evaluate(point)


@dataclass(frozen=True)
class SphereField:
    """Exact signed distance to a plain sphere centred at the origin."""

    radius: float = SPHERE_RADIUS

    @property
    def bounding_radius(self) -> float:
        return self.radius

    def evaluate(self, point: Vector3) -> float:
        return point.length() - self.radius

    def __call__(self, point: Vector3) -> float:
        return self.evaluate(point)


DEFAULT_FIELD = ExplosionField()


def signed_distance(point: Vector3) -> float:
    return DEFAULT_FIELD.evaluate(point)
