# geometry/world.py
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects. The nearest hit over all members wins.

    ``build_bvh`` caches an acceleration tree over the current members;
    ``hit`` uses it until the list is modified.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, split: str = "median") -> Optional[BVHNode]:
        if len(self.objects) == 0:
            self.bvh_root = None
        else:
            self.bvh_root = BVHNode.build(self.objects, split=split)
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)

        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise ValueError("Bounding box of an empty HittableList is undefined")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        return box
