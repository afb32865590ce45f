# geometry/hittable.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, point: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.point = point            # Intersection point
        self.normal = normal          # Unit normal, always facing the incoming ray
        self.t = t                    # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray hit the outside of the surface
        self.material = material
        self.u = u                    # Surface parameterization for texturing
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        ``outward_normal`` is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, point={self.point}, normal={self.normal}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Nearest intersection with ``t`` strictly inside (t_min, t_max), or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
