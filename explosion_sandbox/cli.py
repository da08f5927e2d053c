"""Command line interface for rendering the explosion image."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import load_config_from_env
from .render import render_to_file

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    # //1.- Construct the top-level parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(description="Render a ray-marched noisy explosion to a PPM image")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--fov", type=float, help="Vertical field of view in radians")
    parser.add_argument("--output", "-o", help="Destination .ppm file")
    parser.add_argument("--workers", type=int, help="Worker processes (default: CPU count)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log per-row progress")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point invoked via ``explosion-render``."""

    args = create_parser().parse_args(argv)
    # //2.- Enable a default logging configuration suitable for terminal output.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    try:
        # //3.- Command line flags take precedence over environment variables.
        config = load_config_from_env().with_overrides(
            width=args.width,
            height=args.height,
            fov=args.fov,
            output=args.output,
            workers=args.workers,
        )
        render_to_file(config)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 1
    except OSError as exc:
        LOGGER.error("Failed to write image: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
