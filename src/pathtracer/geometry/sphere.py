# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord


def sphere_uv(p: Vector3):
    """
    Spherical (u, v) of a point on the unit sphere around the origin.

    u: angle around the Y axis from X=-1, mapped to [0,1].
    v: angle from Y=-1 to Y=+1, mapped to [0,1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def _validate_radius(radius: float):
    if not math.isfinite(radius) or radius == 0:
        raise ValueError(f"Sphere radius must be finite and non-zero, got {radius}")


def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrt_disc) / a
        if root <= t_min or root >= t_max:
            return None

    rec = HitRecord()
    rec.t = root
    rec.point = ray.at(root)
    # Dividing by the signed radius flips the normal inward for hollow spheres.
    outward_normal = (rec.point - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = sphere_uv(outward_normal)
    rec.material = material
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but points its normals
    inward, which is how hollow glass bubbles are modelled.
    """
    def __init__(self, center: Vector3, radius: float, material):
        _validate_radius(radius)
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"


class MovingSphere(Hittable):
    """
    Sphere whose center moves linearly from ``center0`` at ``time0`` to
    ``center1`` at ``time1``. Rays sample the position at ``ray.time``.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        _validate_radius(radius)
        if time1 < time0:
            raise ValueError(f"MovingSphere time1 ({time1}) precedes time0 ({time0})")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        frac = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * frac

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        box0 = AABB(self.center0 - offset, self.center0 + offset)
        box1 = AABB(self.center1 - offset, self.center1 + offset)
        return AABB.surrounding_box(box0, box1)
