"""Surface scattering models and textures."""
from pathtracer.materials.material import ABSORBED, Emitted, Material, Scattered, ScatterResult
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.textures import CheckerTexture, ImageTexture, SolidColor, Texture
from pathtracer.materials.texture_loader import create_image_material, load_texture

__all__ = [
    "Material", "Scattered", "Emitted", "ABSORBED", "ScatterResult",
    "Lambertian", "Metal", "Dielectric", "DiffuseLight",
    "Texture", "SolidColor", "CheckerTexture", "ImageTexture",
    "load_texture", "create_image_material",
]
