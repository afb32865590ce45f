# geometry/mesh.py
import logging
import os
from typing import List, Optional, Tuple
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.transform import Matrix4x4
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

# Below this |det| the ray is treated as parallel to the triangle.
PARALLEL_EPSILON = 1e-12
# Half-thickness given to flat axes of triangle bounding boxes.
TRIANGLE_PAD = 1e-4


class Triangle(Hittable):
    """A single triangle with optional per-vertex texture coordinates and normals."""
    def __init__(self,
                 v0: Vector3, v1: Vector3, v2: Vector3, material,
                 uv0: Optional[UV] = None, uv1: Optional[UV] = None, uv2: Optional[UV] = None,
                 n0: Optional[Vector3] = None, n1: Optional[Vector3] = None, n2: Optional[Vector3] = None):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0

        face_normal = self.edge1.cross(self.edge2)
        if face_normal.near_zero():
            raise ValueError(f"Degenerate triangle with zero area: {v0}, {v1}, {v2}")
        self.face_normal = face_normal.normalize()

        # UV coordinates (default to basic mapping if not provided)
        self.uv0 = uv0 if uv0 is not None else UV(0.0, 0.0)
        self.uv1 = uv1 if uv1 is not None else UV(1.0, 0.0)
        self.uv2 = uv2 if uv2 is not None else UV(0.0, 1.0)

        if n0 is None or n1 is None or n2 is None:
            self.n0 = self.n1 = self.n2 = None
        else:
            self.n0 = n0.normalize()
            self.n1 = n1.normalize()
            self.n2 = n2.normalize()

    def interpolate_uv(self, u: float, v: float) -> UV:
        """Interpolate UV coordinates at the given barycentric coordinates."""
        w = 1.0 - u - v
        return UV(
            w * self.uv0.u + u * self.uv1.u + v * self.uv2.u,
            w * self.uv0.v + u * self.uv1.v + v * self.uv2.v
        )

    def get_normal(self, u: float, v: float) -> Vector3:
        """Interpolate normal at the given barycentric coordinates."""
        if self.n0 is None:
            return self.face_normal
        w = 1.0 - u - v
        n = (self.n0 * w + self.n1 * u + self.n2 * v).normalize()
        return n if not n.near_zero() else self.face_normal

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)
        if abs(a) < PARALLEL_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)
        if t <= t_min or t >= t_max:
            return None

        rec = HitRecord()
        rec.t = t
        rec.point = ray.at(t)
        rec.set_face_normal(ray, self.get_normal(u, v))
        uv = self.interpolate_uv(u, v)
        rec.u, rec.v = uv.u, uv.v
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        """Compute the bounding box for the triangle."""
        min_x = min(self.v0.x, self.v1.x, self.v2.x)
        min_y = min(self.v0.y, self.v1.y, self.v2.y)
        min_z = min(self.v0.z, self.v1.z, self.v2.z)
        max_x = max(self.v0.x, self.v1.x, self.v2.x)
        max_y = max(self.v0.y, self.v1.y, self.v2.y)
        max_z = max(self.v0.z, self.v1.z, self.v2.z)
        return AABB(Vector3(min_x, min_y, min_z), Vector3(max_x, max_y, max_z)).pad(TRIANGLE_PAD)


class TriangleMesh(Hittable):
    """A mesh of triangles, intersected through its own BVH."""
    def __init__(self, triangles: List[Triangle]):
        if not triangles:
            raise ValueError("TriangleMesh needs at least one triangle")
        self.triangles = triangles
        self.bvh = BVHNode(triangles)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.bvh.hit(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.bvh.bounding_box()


def _parse_index(token: str, count: int) -> int:
    idx = int(token)
    # OBJ indices are 1-based; negative ones count back from the end.
    idx = idx - 1 if idx > 0 else count + idx
    if idx < 0 or idx >= count:
        raise ValueError(f"index {token} out of range (have {count})")
    return idx


def load_obj(filename: str, material, transform: Optional[Matrix4x4] = None) -> TriangleMesh:
    """
    Load a triangle mesh from a Wavefront OBJ file.

    Polygons are fan-triangulated. Zero-area faces are skipped with a
    warning. ``transform`` is applied to positions and normals.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"OBJ file not found: {filename}")

    vertices: List[Vector3] = []
    normals: List[Vector3] = []
    uvs: List[UV] = []
    triangles: List[Triangle] = []
    skipped = 0

    logger.debug("Opening OBJ file %s", filename)
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue

            try:
                if values[0] == 'v':
                    v = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    if transform is not None:
                        v = transform.transform_point(v)
                    vertices.append(v)
                elif values[0] == 'vn':
                    n = Vector3(float(values[1]), float(values[2]), float(values[3]))
                    if transform is not None:
                        n = transform.transform_normal(n)
                    normals.append(n)
                elif values[0] == 'vt':
                    uvs.append(UV(float(values[1]), float(values[2])))
                elif values[0] == 'f':
                    if len(values) < 4:
                        raise ValueError("face needs at least 3 vertices")

                    def get_vertex_data(vertex_str: str) -> Tuple[int, Optional[int], Optional[int]]:
                        indices = vertex_str.split('/')
                        v_idx = _parse_index(indices[0], len(vertices))
                        t_idx = (_parse_index(indices[1], len(uvs))
                                 if len(indices) > 1 and indices[1] else None)
                        n_idx = (_parse_index(indices[2], len(normals))
                                 if len(indices) > 2 and indices[2] else None)
                        return v_idx, t_idx, n_idx

                    vertex_data = [get_vertex_data(v) for v in values[1:]]

                    for i in range(1, len(vertex_data) - 1):
                        corners = (vertex_data[0], vertex_data[i], vertex_data[i + 1])
                        v0, v1, v2 = (vertices[c[0]] for c in corners)
                        uv0, uv1, uv2 = (uvs[c[1]] if c[1] is not None else None for c in corners)
                        if all(c[2] is not None for c in corners):
                            n0, n1, n2 = (normals[c[2]] for c in corners)
                        else:
                            n0 = n1 = n2 = None
                        try:
                            triangles.append(Triangle(v0, v1, v2, material, uv0, uv1, uv2, n0, n1, n2))
                        except ValueError:
                            skipped += 1
                            logger.warning("Line %d: skipping zero-area triangle", line_num)
            except (IndexError, ValueError) as e:
                raise ValueError(f"Line {line_num}: malformed OBJ statement {line.strip()!r}: {e}") from e

    logger.info("Loaded %s: %d vertices, %d normals, %d UVs, %d triangles (%d skipped)",
                filename, len(vertices), len(normals), len(uvs), len(triangles), skipped)
    return TriangleMesh(triangles)
