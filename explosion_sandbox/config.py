"""Render configuration resolved from defaults, environment and overrides."""
from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from .camera import DEFAULT_FOV

ENV_PREFIX = "EXPLOSION"


@dataclass(frozen=True)
class RenderConfig:
    """Resolved configuration describing a single render."""

    # //1.- Output resolution in pixels.
    width: int = 1280
    height: int = 960
    # //2.- Vertical field of view in radians.
    fov: float = DEFAULT_FOV
    # //3.- Destination of the encoded P6 image.
    output: Path = Path("out.ppm")
    # //4.- Worker processes; ``None`` sizes the pool to the available CPUs.
    workers: Optional[int] = None

    def resolved_workers(self) -> int:
        return self.workers if self.workers is not None else (os.cpu_count() or 1)

    def validate(self) -> "RenderConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Resolution must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < math.pi:
            raise ValueError(f"Field of view must lie in (0, pi), got {self.fov}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.workers}")
        return self

    def with_overrides(self, **overrides: object) -> "RenderConfig":
        # //1.- Ignore unset values so command line flags only replace what was given.
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "output" in changes:
            changes["output"] = Path(changes["output"])
        return replace(self, **changes)


def load_config_from_env(
    env: Optional[Mapping[str, str]] = None,
    *,
    prefix: str = ENV_PREFIX,
) -> RenderConfig:
    """Construct a :class:`RenderConfig` from environment variables."""

    # //1.- Allow dependency injection during testing by accepting a custom mapping.
    source = env if env is not None else os.environ
    defaults = RenderConfig()
    # //2.- Fall back to the built-in scene constants for anything unset.
    try:
        width = int(source.get(f"{prefix}_WIDTH", defaults.width))
        height = int(source.get(f"{prefix}_HEIGHT", defaults.height))
        fov = float(source.get(f"{prefix}_FOV", defaults.fov))
        raw_workers = source.get(f"{prefix}_WORKERS")
        workers = int(raw_workers) if raw_workers else None
    except ValueError as exc:
        raise ValueError(f"Invalid {prefix}_* environment value: {exc}") from exc
    output = Path(source.get(f"{prefix}_OUTPUT", str(defaults.output)))
    # //3.- Return the immutable configuration object used by the render driver.
    return RenderConfig(width=width, height=height, fov=fov, output=output, workers=workers)
