"""Unit tests for axis-aligned rectangles."""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.rect import XYRect, XZRect, YZRect

T_MIN = 0.001


class TestRectIntersection:
    """Tests for ray-rectangle intersection."""

    def test_xy_rect_hit_center(self, gray):
        rect = XYRect(-1, 1, -1, 1, -2, gray)
        rec = rect.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.u == pytest.approx(0.5)
        assert rec.v == pytest.approx(0.5)
        assert rec.front_face is True
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.material is gray

    def test_xy_rect_hit_from_behind(self, gray):
        rect = XYRect(-1, 1, -1, 1, -2, gray)
        rec = rect.hit(Ray(Vector3(0, 0, -4), Vector3(0, 0, 1)), T_MIN, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.front_face is False
        assert rec.normal == Vector3(0, 0, -1)

    def test_xy_rect_outside_extents_misses(self, gray):
        rect = XYRect(-1, 1, -1, 1, -2, gray)
        assert rect.hit(Ray(Vector3(2, 0, 0), Vector3(0, 0, -1)), T_MIN, math.inf) is None

    def test_parallel_ray_misses(self, gray):
        rect = XYRect(-1, 1, -1, 1, -2, gray)
        assert rect.hit(Ray(Vector3(0, 0, -2), Vector3(1, 0, 0)), T_MIN, math.inf) is None

    def test_xz_rect_uv_corners(self, gray):
        rect = XZRect(0, 4, 0, 2, 1, gray)
        rec = rect.hit(Ray(Vector3(1, 5, 0.5), Vector3(0, -1, 0)), T_MIN, math.inf)
        assert rec.t == pytest.approx(4.0)
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.25)
        assert rec.front_face

    def test_yz_rect_from_positive_side(self, gray):
        rect = YZRect(-1, 1, -1, 1, 3, gray)
        rec = rect.hit(Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0)), T_MIN, math.inf)
        assert rec.point == Vector3(3, 0, 0)
        assert rec.normal == Vector3(1, 0, 0)


class TestRectBounds:
    """Tests for rectangle construction and bounding boxes."""

    def test_box_is_padded_on_flat_axis(self, gray):
        box = XYRect(-1, 1, -2, 2, 5, gray).bounding_box()
        assert box.minimum.x == -1 and box.maximum.x == 1
        assert box.minimum.y == -2 and box.maximum.y == 2
        assert box.minimum.z < 5 < box.maximum.z
        assert not box.is_point()

    def test_empty_extents_rejected(self, gray):
        with pytest.raises(ValueError, match="empty"):
            XZRect(1, 1, 0, 2, 0, gray)
