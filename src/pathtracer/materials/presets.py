# materials/presets.py
from pathtracer.core.vector import Color
from pathtracer.materials.metal import Metal
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.textures import CheckerTexture


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)


class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def warm_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 0.95, 0.9) * intensity)

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)


class ColorPresets:
    """Common color presets for materials."""

    RED = Color(0.65, 0.05, 0.05)
    GREEN = Color(0.12, 0.45, 0.15)
    BLUE = Color(0.1, 0.2, 0.5)
    WHITE = Color(0.73, 0.73, 0.73)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)


class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(color1: Color = None, color2: Color = None, scale: float = 10.0) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if color1 is None:
            color1 = Color(0.2, 0.3, 0.1)
        if color2 is None:
            color2 = Color(0.9, 0.9, 0.9)
        return CheckerTexture(color1, color2, scale)
