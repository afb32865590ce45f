# materials/dielectric.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered

# Clear glass: nothing is absorbed.
GLASS_ATTENUATION = Color(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Refractive material (glass, water) with index of refraction ``ref_idx``.
    """
    def __init__(self, ref_idx: float):
        if not ref_idx > 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Scattered:
        # Entering the medium from outside, or leaving it.
        eta_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = eta_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, eta_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, eta_ratio)

        return Scattered(GLASS_ATTENUATION, Ray(rec.point, direction, ray_in.time))

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"
