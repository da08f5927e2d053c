"""Lightweight 3D vector math utilities.

Vector arithmetic is kept small and explicit so every deterministic step
of the ray marcher is easy to audit. Only what the renderer needs is
implemented.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector with a handful of math helpers."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Vector3":
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize zero-length vector")
        return self * (1.0 / length)

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        return self * (1.0 - t) + other * t

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def from_iter(values: Iterable[float]) -> "Vector3":
        x, y, z = values
        return Vector3(float(x), float(y), float(z))


def add(a: Vector3, b: Vector3) -> Vector3:
    return a + b


def sub(a: Vector3, b: Vector3) -> Vector3:
    return a - b


def scale(a: Vector3, k: float) -> Vector3:
    return a * k


def negate(a: Vector3) -> Vector3:
    return -a


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def magnitude(a: Vector3) -> float:
    return a.length()


def normalize(a: Vector3) -> Vector3:
    """Return ``a`` scaled to unit length.

    ``a`` must have a non-zero magnitude; a zero vector raises
    :class:`ValueError`.
    """

    return a.normalized()
