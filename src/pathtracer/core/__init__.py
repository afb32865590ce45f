"""Vector math, rays, bounding boxes and sampling helpers."""
from pathtracer.core.vector import Color, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.uv import UV
from pathtracer.core.transform import Matrix4x4

__all__ = ["Vector3", "Color", "Ray", "AABB", "UV", "Matrix4x4"]
