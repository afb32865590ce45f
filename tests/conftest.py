"""Pytest configuration for path tracer tests.

Shared fixtures: seeded random streams, a scripted stream for forcing
specific samples, and helpers for building hit records by hand.
"""

import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.lambertian import Lambertian


class ScriptedRng:
    """Stand-in for random.Random that replays fixed values.

    ``uniform(a, b)`` and ``random()`` both pop the next scripted value
    and return it unchanged, so tests can place samples exactly.
    """

    def __init__(self, values):
        self.values = list(values)

    def _next(self):
        if not self.values:
            raise AssertionError("ScriptedRng ran out of values")
        return self.values.pop(0)

    def uniform(self, a, b):
        return self._next()

    def random(self):
        return self._next()


@pytest.fixture
def rng():
    """A seeded random stream so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def make_hit():
    """Build a HitRecord for a ray striking a surface at ``point``."""

    def _make_hit(ray, point, outward_normal, material=None, t=1.0):
        rec = HitRecord(point=point, t=t, material=material)
        rec.set_face_normal(ray, outward_normal)
        return rec

    return _make_hit


@pytest.fixture
def down_ray():
    """Ray travelling straight down -z from z=1."""
    return Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
