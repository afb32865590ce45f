# materials/lambertian.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered
from pathtracer.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scattered:
        # Normal plus a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero() or not scatter_direction.is_finite():
            scatter_direction = rec.normal

        scattered = Ray(rec.point, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.point)
        return Scattered(attenuation, scattered)

    def __repr__(self) -> str:
        return f"Lambertian({self.texture!r})"
