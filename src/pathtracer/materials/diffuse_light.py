# materials/diffuse_light.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Emitted, Material
from pathtracer.materials.textures import Texture, as_texture


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Emitted:
        """
        Emissive materials do not scatter rays; the path terminates here.
        """
        return Emitted(self.emitted(rec.u, rec.v, rec.point))

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return self.texture.value(u, v, p)

    def __repr__(self) -> str:
        return f"DiffuseLight({self.texture!r})"
