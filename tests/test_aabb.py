"""Unit tests for axis-aligned bounding boxes."""

import math

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestAABBHit:
    """Tests for the slab intersection test."""

    def test_axis_aligned_ray_hits(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, 0.001, math.inf)

    def test_parallel_ray_outside_slab_misses(self, unit_box):
        ray = Ray(Vector3(2, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.001, math.inf)

    def test_ray_pointing_away_misses(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, -1))
        assert not unit_box.hit(ray, 0.001, math.inf)

    def test_interval_ending_before_box_misses(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, 0.001, 3.0)

    def test_origin_inside_box_hits(self, unit_box):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 2, 3))
        assert unit_box.hit(ray, 0.001, math.inf)

    def test_diagonal_ray(self, unit_box):
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, 1))
        assert unit_box.hit(ray, 0.001, math.inf)
        ray = Ray(Vector3(-5, -5, -5), Vector3(1, 1, -1))
        assert not unit_box.hit(ray, 0.001, math.inf)


class TestAABBConstruction:
    """Tests for box validation and combinators."""

    def test_inverted_box_raises(self):
        with pytest.raises(ValueError, match="minimum exceeds maximum"):
            AABB(Vector3(1, 0, 0), Vector3(0, 1, 1))

    def test_nan_bounds_raise(self):
        with pytest.raises(ValueError, match="NaN"):
            AABB(Vector3(math.nan, 0, 0), Vector3(1, 1, 1))

    def test_surrounding_box(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, 0, 0)
        assert box.maximum == Vector3(1, 3, 4)

    def test_surface_area(self, unit_box):
        assert unit_box.surface_area() == 24

    def test_centroid_and_longest_axis(self):
        box = AABB(Vector3(0, 0, 0), Vector3(2, 6, 4))
        assert box.centroid(1) == 3
        assert box.longest_axis() == 1

    def test_pad_thickens_flat_axes_only(self):
        flat = AABB(Vector3(0, 0, 5), Vector3(1, 1, 5))
        padded = flat.pad(1e-2)
        assert padded.extent(2) == pytest.approx(1e-2)
        assert padded.extent(0) == 1
        assert not flat.is_point()

    def test_point_box(self):
        p = Vector3(1, 2, 3)
        assert AABB(p, p).is_point()
