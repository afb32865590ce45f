"""Ray-intersectable primitives, containers and the BVH."""
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.rect import AARect, XYRect, XZRect, YZRect
from pathtracer.geometry.mesh import Triangle, TriangleMesh, load_obj
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.world import HittableList

__all__ = [
    "HitRecord", "Hittable",
    "Sphere", "MovingSphere",
    "AARect", "XYRect", "XZRect", "YZRect",
    "Triangle", "TriangleMesh", "load_obj",
    "BVHNode", "HittableList",
]
