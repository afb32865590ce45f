# geometry/rect.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the flat axis of a rectangle's bounding box.
RECT_PAD = 1e-4


class AARect(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``axis == k``.

    ``a`` and ``b`` are the two remaining axes in increasing order, e.g.
    for ``axis=2`` (an XY rectangle) ``a`` is x and ``b`` is y. The
    outward normal points along the positive ``axis`` direction.
    """
    def __init__(self, axis: int, a0: float, a1: float, b0: float, b1: float,
                 k: float, material):
        if axis not in (0, 1, 2):
            raise ValueError(f"Rectangle axis must be 0, 1 or 2, got {axis}")
        if not (a0 < a1 and b0 < b1):
            raise ValueError(f"Rectangle extents are empty: [{a0}, {a1}] x [{b0}, {b1}]")
        self.axis = axis
        self.a_axis, self.b_axis = [i for i in range(3) if i != axis]
        self.a0, self.a1 = a0, a1
        self.b0, self.b1 = b0, b1
        self.k = k
        self.material = material
        n = [0.0, 0.0, 0.0]
        n[axis] = 1.0
        self.outward_normal = Vector3(*n)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t <= t_min or t >= t_max:
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.point = ray.at(t)
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.set_face_normal(ray, self.outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        lo[self.axis], hi[self.axis] = self.k - RECT_PAD, self.k + RECT_PAD
        return AABB(Vector3(*lo), Vector3(*hi))


class XYRect(AARect):
    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(2, x0, x1, y0, y1, k, material)


class XZRect(AARect):
    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(1, x0, x1, z0, z1, k, material)


class YZRect(AARect):
    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(0, y0, y1, z0, z1, k, material)
