"""Unit tests for the thin-lens camera."""

import math

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3


def unit(v):
    return v.normalize()


class TestCameraRays:
    """Tests for ray generation."""

    def test_center_ray_points_at_target(self, rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vertical_fov=90, aspect_ratio=1.0)
        ray = camera.get_ray(0.5, 0.5, rng)
        assert ray.origin == Vector3(0, 0, 0)
        d = unit(ray.direction)
        assert d.x == pytest.approx(0.0, abs=1e-12)
        assert d.y == pytest.approx(0.0, abs=1e-12)
        assert d.z == pytest.approx(-1.0)

    def test_corners_span_field_of_view(self, rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vertical_fov=90, aspect_ratio=2.0)
        top = unit(camera.get_ray(0.5, 1.0, rng).direction)
        # Half of a 90 degree field of view.
        assert math.degrees(math.acos(-top.z)) == pytest.approx(45.0)
        assert top.y > 0

        lower_left = camera.get_ray(0.0, 0.0, rng).direction
        assert lower_left.x == pytest.approx(-2.0)
        assert lower_left.y == pytest.approx(-1.0)

    def test_basis_is_orthonormal(self):
        camera = Camera(Vector3(3, 2, 1), Vector3(0, 0, 0), vertical_fov=40)
        for a, b in ((camera.u, camera.v), (camera.v, camera.w), (camera.u, camera.w)):
            assert a.dot(b) == pytest.approx(0.0, abs=1e-12)
        for axis in (camera.u, camera.v, camera.w):
            assert axis.length() == pytest.approx(1.0)

    def test_pinhole_ignores_rng(self, scripted_rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1))
        # An empty script fails if the camera draws anything.
        ray = camera.get_ray(0.2, 0.7, scripted_rng([]))
        assert ray.time == 0.0

    def test_aperture_rays_converge_on_focus_plane(self, rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vertical_fov=60, aspect_ratio=1.0,
                        aperture=0.5, focus_dist=3.0)
        pinhole = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vertical_fov=60, aspect_ratio=1.0,
                         focus_dist=3.0)
        target = pinhole.get_ray(0.3, 0.6, rng).at(1.0)
        origins = set()
        for _ in range(20):
            ray = camera.get_ray(0.3, 0.6, rng)
            assert (ray.origin - Vector3(0, 0, 0)).length() <= 0.25 + 1e-12
            assert ray.origin.z == pytest.approx(0.0)
            focus = ray.at(1.0)
            assert (focus - target).length() == pytest.approx(0.0, abs=1e-9)
            origins.add((ray.origin.x, ray.origin.y))
        assert len(origins) > 1

    def test_shutter_times(self, rng):
        camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), shutter_open=0.2, shutter_close=0.6)
        times = [camera.get_ray(0.5, 0.5, rng).time for _ in range(100)]
        assert all(0.2 <= t <= 0.6 for t in times)
        assert len(set(times)) > 1


class TestCameraValidation:
    """Tests for rejected configurations."""

    @pytest.mark.parametrize("kwargs", [
        {"vertical_fov": 0.0},
        {"vertical_fov": 180.0},
        {"aspect_ratio": 0.0},
        {"aperture": -1.0},
        {"focus_dist": 0.0},
        {"shutter_open": 1.0, "shutter_close": 0.5},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), **kwargs)

    def test_coincident_eye_and_target(self):
        with pytest.raises(ValueError):
            Camera(Vector3(1, 1, 1), Vector3(1, 1, 1))

    def test_default_up_is_not_shared(self):
        first = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1))
        second = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert first.up == Vector3(0, 1, 0)
        assert first.up is not second.up

    def test_up_parallel_to_view(self):
        with pytest.raises(ValueError):
            Camera(Vector3(0, 5, 0), Vector3(0, 0, 0), up=Vector3(0, 1, 0))
