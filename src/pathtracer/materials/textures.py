# materials/textures.py
import math
from typing import Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Color, Vector3


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidColor({self.color})"


def as_texture(albedo: Union[Color, Texture]) -> Texture:
    """Wrap plain colors so materials can always sample a texture."""
    if isinstance(albedo, Texture):
        return albedo
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    raise TypeError(f"Expected a Color or Texture, got {type(albedo).__name__}")


class CheckerTexture(Texture):
    """
    A 3D checker pattern alternating between two sub-textures.

    The pattern is the sign of sin(scale*x)*sin(scale*y)*sin(scale*z),
    so it is solid in space and does not depend on (u, v).
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture], scale: float = 10.0):
        if scale <= 0:
            raise ValueError(f"Checker scale must be positive, got {scale}")
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class ImageTexture(Texture):
    """A texture backed by an RGB image, sampled with nearest-neighbour lookup."""
    def __init__(self, data: np.ndarray):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image texture data must be (height, width, 3), got {data.shape}")
        self.data = data
        self.height, self.width = data.shape[0], data.shape[1]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return cls(np.asarray(img, dtype=np.float64) / 255.0)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Handle texture wrapping
        u = u % 1.0
        v = 1.0 - (v % 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Color(float(r), float(g), float(b))
