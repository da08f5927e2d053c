"""Row-parallel render driver."""
from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from pathlib import Path
from typing import List, Optional

from .camera import PinholeCamera
from .config import RenderConfig
from .framebuffer import Framebuffer
from .palette import shade_ray
from .ppm import write_ppm
from .sdf import DEFAULT_FIELD
from .tracer import DistanceField
from .vector import Vector3

LOGGER = logging.getLogger(__name__)


def render_row(row: int, camera: PinholeCamera, field: DistanceField = DEFAULT_FIELD) -> List[Vector3]:
    """Shade every pixel of ``row``; reads nothing but its arguments."""

    return [
        shade_ray(camera.position, camera.ray_direction(column, row), field)
        for column in range(camera.width)
    ]


def render(
    config: RenderConfig,
    field: DistanceField = DEFAULT_FIELD,
) -> Framebuffer:
    """Render the explosion into a fresh framebuffer.

    Each row is an independent task writing only its own slice of the
    framebuffer, so the result does not depend on the worker count.
    """

    config.validate()
    camera = PinholeCamera(config.width, config.height, config.fov)
    framebuffer = Framebuffer(config.width, config.height)
    workers = min(config.resolved_workers(), config.height)
    task = partial(render_row, camera=camera, field=field)

    LOGGER.info("Rendering %dx%d with %d worker(s)", config.width, config.height, workers)
    if workers == 1:
        for row in range(config.height):
            framebuffer.set_row(row, task(row))
            LOGGER.debug("Row %d done", row)
        return framebuffer

    chunksize = max(1, config.height // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers) as executor:
        for row, colors in enumerate(executor.map(task, range(config.height), chunksize=chunksize)):
            framebuffer.set_row(row, colors)
            LOGGER.debug("Row %d done", row)
    return framebuffer


def render_to_file(
    config: RenderConfig,
    field: DistanceField = DEFAULT_FIELD,
    output: Optional[Path] = None,
) -> Path:
    started = time.perf_counter()
    framebuffer = render(config, field)
    elapsed = time.perf_counter() - started
    target = write_ppm(output or config.output, framebuffer)
    LOGGER.info("Rendered in %.2fs, wrote %s", elapsed, target)
    return target
