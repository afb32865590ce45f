# core/transform.py
import math
import numpy as np
from pathtracer.core.vector import Vector3


class Matrix4x4:
    """
    Affine 4x4 transformation in row-major form, applied to column vectors.

    Compose with ``@``: ``(a @ b).transform_point(p)`` applies ``b`` first.
    """
    __slots__ = ("m",)

    def __init__(self, values=None):
        if values is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            m = np.array(values, dtype=np.float64)
            if m.shape != (4, 4):
                raise ValueError(f"Matrix4x4 needs a 4x4 array, got shape {m.shape}")
            self.m = m

    @classmethod
    def identity(cls) -> "Matrix4x4":
        return cls()

    @classmethod
    def scale(cls, sx: float, sy: float = None, sz: float = None) -> "Matrix4x4":
        """Per-axis scale; a single argument scales uniformly."""
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return cls(np.diag([sx, sy, sz, 1.0]))

    @classmethod
    def translation(cls, offset: Vector3) -> "Matrix4x4":
        m = np.identity(4, dtype=np.float64)
        m[0:3, 3] = [offset.x, offset.y, offset.z]
        return cls(m)

    @classmethod
    def rotation_x(cls, radians: float) -> "Matrix4x4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[1.0, 0.0, 0.0, 0.0],
                    [0.0, c, -s, 0.0],
                    [0.0, s, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_y(cls, radians: float) -> "Matrix4x4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, 0.0, s, 0.0],
                    [0.0, 1.0, 0.0, 0.0],
                    [-s, 0.0, c, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    @classmethod
    def rotation_z(cls, radians: float) -> "Matrix4x4":
        c, s = math.cos(radians), math.sin(radians)
        return cls([[c, -s, 0.0, 0.0],
                    [s, c, 0.0, 0.0],
                    [0.0, 0.0, 1.0, 0.0],
                    [0.0, 0.0, 0.0, 1.0]])

    def __matmul__(self, other: "Matrix4x4") -> "Matrix4x4":
        return Matrix4x4(self.m @ other.m)

    def transform_point(self, p: Vector3) -> Vector3:
        x, y, z, _ = self.m @ np.array([p.x, p.y, p.z, 1.0])
        return Vector3(float(x), float(y), float(z))

    def transform_vector(self, v: Vector3) -> Vector3:
        """Applies the linear part only (no translation)."""
        x, y, z = self.m[0:3, 0:3] @ np.array([v.x, v.y, v.z])
        return Vector3(float(x), float(y), float(z))

    def transform_normal(self, n: Vector3) -> Vector3:
        """Normals transform by the inverse transpose of the linear part."""
        inv_t = np.linalg.inv(self.m[0:3, 0:3]).T
        x, y, z = inv_t @ np.array([n.x, n.y, n.z])
        return Vector3(float(x), float(y), float(z)).normalize()

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{v:g}" for v in row) + "]" for row in self.m)
        return f"Matrix4x4([{rows}])"
