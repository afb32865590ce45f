# renderer/tone_mapping.py
import numpy as np


def gamma_correct(linear: np.ndarray) -> np.ndarray:
    """
    Gamma-2 correction of a linear radiance image (square root per channel).
    Negative values are clamped to zero first.
    """
    return np.sqrt(np.maximum(linear, 0.0))


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Quantize a gamma-corrected image in [0, 1] to 8-bit RGB for encoders.
    """
    return (np.clip(image, 0.0, 0.999) * 256).astype(np.uint8)
