# geometry/bvh.py
import logging
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

SPLIT_METHODS = ("median", "sah")


def _centroid(obj, axis: int) -> float:
    return obj.bounding_box().centroid(axis)


def _sah_split(objects: list, box: AABB, max_bin_count: int):
    """
    Binned surface-area-heuristic split.

    Returns ``(axis, count)`` where ``count`` objects go to the left child
    once the list is sorted by centroid on ``axis``, or None when no
    split beats keeping everything together.
    """
    span = len(objects)
    best = None
    best_cost = float('inf')

    for axis in range(3):
        centroids = [_centroid(obj, axis) for obj in objects]
        min_val = min(centroids)
        max_val = max(centroids)
        # Skip if the extent is too small
        if max_val - min_val < 1e-9:
            continue

        bin_count = min(max_bin_count, span)
        bin_width = (max_val - min_val) / bin_count
        counts = [0] * bin_count
        boxes: List[Optional[AABB]] = [None] * bin_count

        for obj, c in zip(objects, centroids):
            idx = min(bin_count - 1, int((c - min_val) / bin_width))
            counts[idx] += 1
            obj_box = obj.bounding_box()
            boxes[idx] = obj_box if boxes[idx] is None else AABB.surrounding_box(boxes[idx], obj_box)

        # Right-to-left sweep: area of everything at or after bin i.
        right_areas = [0.0] * bin_count
        right_box = None
        for i in range(bin_count - 1, -1, -1):
            if boxes[i] is not None:
                right_box = boxes[i] if right_box is None else AABB.surrounding_box(right_box, boxes[i])
            right_areas[i] = right_box.surface_area() if right_box is not None else 0.0

        # Left-to-right sweep evaluating each split plane.
        left_box = None
        left_count = 0
        for i in range(1, bin_count):
            if boxes[i - 1] is not None:
                left_box = boxes[i - 1] if left_box is None else AABB.surrounding_box(left_box, boxes[i - 1])
            left_count += counts[i - 1]
            right_count = span - left_count
            if left_count == 0 or right_count == 0:
                continue
            cost = 0.125 + (left_count * left_box.surface_area()
                            + right_count * right_areas[i]) / max(box.surface_area(), 1e-12)
            if cost < best_cost:
                best_cost = cost
                best = (axis, left_count)

    if best is None or best_cost >= span:
        return None
    return best


class BVHNode(Hittable):
    """
    Bounding volume hierarchy over a list of hittables.

    Children are either nested ``BVHNode`` instances or the primitives
    themselves; a node holding one primitive uses it for both children.
    """
    def __init__(self, objects: list, split: str = "median", max_bin_count: int = 16):
        if split not in SPLIT_METHODS:
            raise ValueError(f"Unknown BVH split method {split!r}, expected one of {SPLIT_METHODS}")
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH from an empty object list")
        for obj in objects:
            if obj.bounding_box().is_point():
                raise ValueError(f"Object {obj!r} has a zero-extent bounding box")

        # Sort a private copy so the caller's list keeps its order.
        self._build(list(objects), split, max_bin_count)

    @classmethod
    def build(cls, objects: list, split: str = "median") -> "BVHNode":
        node = cls(objects, split=split)
        logger.info("Built BVH over %d objects: %d nodes, depth %d",
                    len(objects), node.node_count(), node.depth())
        return node

    def _build(self, objects: list, split: str, max_bin_count: int):
        span = len(objects)

        if span == 1:
            self.left = self.right = objects[0]
            self.box = objects[0].bounding_box()
            return

        if span == 2:
            self.left, self.right = objects
            self.box = AABB.surrounding_box(objects[0].bounding_box(), objects[1].bounding_box())
            return

        # Compute the bounding box of all objects for this node
        box = objects[0].bounding_box()
        for obj in objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        self.box = box

        split_at = None
        if split == "sah":
            best = _sah_split(objects, box, max_bin_count)
            if best is not None:
                axis, split_at = best

        if split_at is None:
            # Median split along the axis where the centroids spread widest.
            spreads = []
            for a in range(3):
                cs = [_centroid(obj, a) for obj in objects]
                spreads.append(max(cs) - min(cs))
            axis = spreads.index(max(spreads))
            split_at = span // 2

        objects.sort(key=lambda obj: _centroid(obj, axis))
        self.left = self._child(objects[:split_at], split, max_bin_count)
        self.right = self._child(objects[split_at:], split, max_bin_count)

    @staticmethod
    def _child(objects: list, split: str, max_bin_count: int) -> Hittable:
        if len(objects) == 1:
            return objects[0]
        node = BVHNode.__new__(BVHNode)
        node._build(objects, split, max_bin_count)
        return node

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is self.left:
            return hit_left

        # Only look for right-hand hits closer than the left one.
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def node_count(self) -> int:
        count = 1
        for child in self._children():
            if isinstance(child, BVHNode):
                count += child.node_count()
        return count

    def depth(self) -> int:
        depths = [child.depth() for child in self._children() if isinstance(child, BVHNode)]
        return 1 + max(depths, default=0)

    def _children(self):
        if self.right is self.left:
            return (self.left,)
        return (self.left, self.right)
