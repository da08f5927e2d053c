"""Tests for the immutable vector primitive."""
from __future__ import annotations

import math

import pytest

from explosion_sandbox.vector import Vector3, add, dot, magnitude, negate, normalize, scale, sub


def test_arithmetic_produces_new_values():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    assert add(a, b) == Vector3(-1.0, 2.5, 7.0)
    assert sub(a, b) == Vector3(3.0, 1.5, -1.0)
    assert scale(a, 2.0) == Vector3(2.0, 4.0, 6.0)
    assert 2.0 * a == a * 2.0
    assert negate(a) == Vector3(-1.0, -2.0, -3.0)
    assert a == Vector3(1.0, 2.0, 3.0)


def test_dot_and_magnitude():
    a = Vector3(2.0, 3.0, 6.0)
    assert dot(a, Vector3(1.0, 0.0, 0.0)) == 2.0
    assert magnitude(a) == pytest.approx(7.0)


def test_normalize_returns_unit_vector():
    n = normalize(Vector3(0.0, 3.0, -4.0))
    assert n.length() == pytest.approx(1.0)
    assert n.y == pytest.approx(0.6)
    assert n.z == pytest.approx(-0.8)


def test_normalize_zero_vector_is_rejected():
    with pytest.raises(ValueError):
        normalize(Vector3.zero())


def test_lerp_hits_endpoints_exactly():
    a = Vector3(0.1, 0.7, 0.3)
    b = Vector3(0.9, 0.2, math.pi)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
