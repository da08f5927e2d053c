"""Tests for sphere tracing and normal estimation."""
from __future__ import annotations

import pytest

from explosion_sandbox.sdf import SPHERE_RADIUS, SphereField, signed_distance
from explosion_sandbox.tracer import MAX_STEPS, MIN_STEP, Ray, sphere_trace, surface_normal, trace_ray
from explosion_sandbox.vector import Vector3


class CountingField:
    """Distance field stub that records how often it is sampled."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def __call__(self, point: Vector3) -> float:
        self.calls += 1
        return self.value


CAMERA = Vector3(0.0, 0.0, 3.0)
FORWARD = Vector3(0.0, 0.0, -1.0)


def test_rays_outside_bounding_sphere_skip_the_field():
    field = CountingField(-1.0)
    direction = Vector3(1.0, 0.0, -0.2).normalized()
    assert sphere_trace(Vector3(0.0, 2.0, 3.0), direction, field) is None
    assert sphere_trace(CAMERA, Vector3(1.0, 0.0, 0.0), field) is None
    assert field.calls == 0


def test_first_negative_sample_is_reported():
    field = CountingField(-1.0)
    assert sphere_trace(CAMERA, FORWARD, field) == CAMERA
    assert field.calls == 1


def test_step_budget_exhaustion_is_a_miss():
    field = CountingField(1.0)
    assert sphere_trace(CAMERA, FORWARD, field) is None
    assert field.calls == MAX_STEPS


def test_axis_ray_converges_just_inside_plain_sphere():
    hit = sphere_trace(CAMERA, FORWARD, SphereField())
    assert hit is not None
    distance = SphereField()(hit)
    assert -MIN_STEP - 1e-9 <= distance < 0.0


def test_axis_ray_converges_just_inside_explosion():
    hit = sphere_trace(CAMERA, FORWARD)
    assert hit is not None
    assert 0.0 < hit.z < SPHERE_RADIUS
    assert -0.3 < signed_distance(hit) < 0.0


def test_trace_ray_wraps_sphere_trace():
    ray = Ray(CAMERA, FORWARD)
    assert trace_ray(ray) == sphere_trace(CAMERA, FORWARD)


def test_normal_on_plain_sphere_is_radial():
    radial = Vector3(1.0, 2.0, 3.0).normalized()
    normal = surface_normal(radial * SPHERE_RADIUS, SphereField())
    assert normal.length() == pytest.approx(1.0)
    assert normal.dot(radial) > 0.99



def test_bounding_radius_override_widens_the_reject_test():
    field = CountingField(-1.0)
    sideways = Vector3(1.0, 0.0, 0.0)
    assert sphere_trace(CAMERA, sideways, field, bounding_radius=4.0) == CAMERA
    assert field.calls == 1
