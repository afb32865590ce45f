# renderer/background.py
from typing import Optional
from pathtracer.core.vector import Color, Vector3


class Background:
    """Radiance seen by rays that escape the scene."""
    def __call__(self, direction: Vector3) -> Color:
        raise NotImplementedError("Background subclasses must be callable.")


class SolidBackground(Background):
    def __init__(self, color: Color):
        self.color = color

    def __call__(self, direction: Vector3) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidBackground({self.color})"


class GradientBackground(Background):
    """
    Vertical sky gradient. Interpolates from ``bottom`` (looking straight
    down) to ``top`` (looking straight up) on the unit direction's y.
    """
    def __init__(self, bottom: Optional[Color] = None, top: Optional[Color] = None):
        self.bottom = bottom if bottom is not None else Color(1.0, 1.0, 1.0)
        self.top = top if top is not None else Color(0.5, 0.7, 1.0)

    def __call__(self, direction: Vector3) -> Color:
        unit_direction = direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return self.bottom * (1.0 - a) + self.top * a

    def __repr__(self) -> str:
        return f"GradientBackground({self.bottom}, {self.top})"
