# materials/material.py
from dataclasses import dataclass
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.hittable import HitRecord


@dataclass(frozen=True)
class Scattered:
    """The surface redirects the ray, filtering it by ``attenuation``."""
    attenuation: Color
    ray: Ray


@dataclass(frozen=True)
class Emitted:
    """The surface is a light source; the path ends with ``color``."""
    color: Color


class _Absorbed:
    """The ray is absorbed and contributes no light."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (_Absorbed, ())

    def __repr__(self) -> str:
        return "ABSORBED"


ABSORBED = _Absorbed()

ScatterResult = Union[Scattered, Emitted, _Absorbed]

BLACK = Color(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        """
        Responds to ``ray_in`` arriving at ``rec``, drawing any randomness
        from ``rng``. Returns ``Scattered``, ``Emitted`` or ``ABSORBED``.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Light emitted at the surface point; black unless the material glows.
        """
        return BLACK
