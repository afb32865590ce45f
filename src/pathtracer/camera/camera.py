# camera/camera.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3


class Camera:
    """
    Thin-lens camera looking from ``look_from`` towards ``look_at``.

    ``vertical_fov`` is in degrees. With ``aperture > 0`` rays start on a
    lens disk of radius ``aperture / 2`` and converge on the plane at
    ``focus_dist``. Ray times are drawn from the shutter window.

    The camera is configured once and never mutated, so many render
    workers can share it.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Optional[Vector3] = None,
                 vertical_fov: float = 90.0, aspect_ratio: float = 16.0 / 9.0,
                 aperture: float = 0.0, focus_dist: float = 1.0,
                 shutter_open: float = 0.0, shutter_close: float = 0.0):
        if not 0.0 < vertical_fov < 180.0:
            raise ValueError(f"vertical_fov must be in (0, 180) degrees, got {vertical_fov}")
        if not aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {aperture}")
        if not focus_dist > 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        if shutter_close < shutter_open:
            raise ValueError(f"shutter_close ({shutter_close}) precedes shutter_open ({shutter_open})")

        self.look_from = look_from
        self.look_at = look_at
        self.up = up if up is not None else Vector3(0, 1, 0)
        self.vertical_fov = vertical_fov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.shutter_open = shutter_open
        self.shutter_close = shutter_close
        self.lens_radius = aperture / 2.0
        self._build_basis()

    def _build_basis(self):
        """Computes the orthonormal basis and viewport."""
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ValueError("look_from and look_at must differ")
        self.w = view.normalize()

        right = self.up.cross(self.w)
        if right.near_zero():
            raise ValueError("up vector must not be parallel to the view direction")
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        h = math.tan(math.radians(self.vertical_fov) / 2)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.look_from
                                  - self.horizontal / 2
                                  - self.vertical / 2
                                  - self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Ray through image-plane coordinates (s, t), both in [0, 1] with
        (0, 0) at the lower-left corner.
        """
        origin = self.look_from
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        direction = (self.lower_left_corner
                     + self.horizontal * s
                     + self.vertical * t
                     - origin)

        time = self.shutter_open
        if self.shutter_close > self.shutter_open:
            time = rng.uniform(self.shutter_open, self.shutter_close)
        return Ray(origin, direction, time)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from}, look_at={self.look_at}, "
                f"vertical_fov={self.vertical_fov}, aspect_ratio={self.aspect_ratio})")
