# materials/metal.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere, reflect
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import ABSORBED, Material, Scattered, ScatterResult
from pathtracer.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    ``fuzz`` in [0, 1] perturbs the mirror direction; larger values are clamped.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_in_unit_sphere(rng) * self.fuzz

        if reflected.dot(rec.normal) <= 0:
            # Fuzzed below the surface.
            return ABSORBED

        attenuation = self.texture.value(rec.u, rec.v, rec.point)
        return Scattered(attenuation, Ray(rec.point, reflected, ray_in.time))

    def __repr__(self) -> str:
        return f"Metal({self.texture!r}, fuzz={self.fuzz})"
