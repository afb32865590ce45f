# materials/texture_loader.py
import logging
import os
from PIL import UnidentifiedImageError
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        texture = ImageTexture.from_file(image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture


def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, Metal)
        **material_params: Additional parameters for the material (e.g., fuzz for Metal)

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
