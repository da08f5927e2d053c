"""Explosion sandbox package.

Renders a still image of a noise-perturbed sphere by sphere tracing an
implicit surface and shading the first hit with a fire palette.
"""

from .vector import Vector3
from .noise import fbm, noise
from .sdf import ExplosionField, SphereField, signed_distance, SPHERE_RADIUS, NOISE_AMPLITUDE
from .tracer import Ray, sphere_trace, surface_normal
from .palette import BACKGROUND, palette_fire, shade_hit, shade_ray
from .camera import PinholeCamera
from .framebuffer import Framebuffer, encode_rgb8
from .ppm import read_ppm, write_ppm
from .config import RenderConfig, load_config_from_env
from .render import render, render_row, render_to_file

__all__ = [
    "Vector3",
    "noise",
    "fbm",
    "ExplosionField",
    "SphereField",
    "signed_distance",
    "SPHERE_RADIUS",
    "NOISE_AMPLITUDE",
    "Ray",
    "sphere_trace",
    "surface_normal",
    "BACKGROUND",
    "palette_fire",
    "shade_hit",
    "shade_ray",
    "PinholeCamera",
    "Framebuffer",
    "encode_rgb8",
    "read_ppm",
    "write_ppm",
    "RenderConfig",
    "load_config_from_env",
    "render",
    "render_row",
    "render_to_file",
]
