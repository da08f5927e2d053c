"""Fixed pinhole camera producing primary rays."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from .tracer import Ray
from .vector import Vector3

DEFAULT_FOV = math.pi / 3.0


@dataclass(frozen=True)
class PinholeCamera:
    """Camera at ``position`` looking along ``-z`` with a vertical ``fov``."""

    width: int
    height: int
    fov: float = DEFAULT_FOV
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 3.0))

    @property
    def focal_depth(self) -> float:
        return -self.height / (2.0 * math.tan(self.fov / 2.0))

    def ray_direction(self, column: int, row: int) -> Vector3:
        dir_x = (column + 0.5) - self.width / 2.0
        # Negated so that row 0 is the top of the image.
        dir_y = -(row + 0.5) + self.height / 2.0
        return Vector3(dir_x, dir_y, self.focal_depth).normalized()

    def ray(self, column: int, row: int) -> Ray:
        return Ray(self.position, self.ray_direction(column, row))
