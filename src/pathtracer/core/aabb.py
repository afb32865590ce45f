# core/aabb.py
import math
from pathtracer.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        for axis in range(3):
            lo, hi = minimum[axis], maximum[axis]
            if math.isnan(lo) or math.isnan(hi):
                raise ValueError(f"AABB has NaN bounds: {minimum}, {maximum}")
            if lo > hi:
                raise ValueError(f"AABB minimum exceeds maximum on axis {axis}: {lo} > {hi}")
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            d = ray.direction[a]
            o = ray.origin[a]
            lo = self.minimum[a]
            hi = self.maximum[a]
            if d == 0.0:
                # Parallel to this slab: either always inside it or never.
                if o < lo or o > hi:
                    return False
                continue
            invD = 1.0 / d
            t0 = (lo - o) * invD
            t1 = (hi - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def extent(self, axis: int) -> float:
        return self.maximum[axis] - self.minimum[axis]

    def centroid(self, axis: int) -> float:
        return (self.minimum[axis] + self.maximum[axis]) * 0.5

    def longest_axis(self) -> int:
        extents = [self.extent(a) for a in range(3)]
        return extents.index(max(extents))

    def is_point(self) -> bool:
        """True when the box has zero extent on every axis."""
        return all(self.extent(a) == 0.0 for a in range(3))

    def surface_area(self) -> float:
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    def pad(self, delta: float = 1e-4) -> "AABB":
        """
        Returns a copy grown so that no axis is thinner than ``delta``.
        """
        lo = list(self.minimum)
        hi = list(self.maximum)
        for a in range(3):
            if hi[a] - lo[a] < delta:
                lo[a] -= delta / 2
                hi[a] += delta / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
