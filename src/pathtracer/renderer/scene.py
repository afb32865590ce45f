# renderer/scene.py
from dataclasses import dataclass, field
from pathtracer.camera.camera import Camera
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.background import Background, GradientBackground


@dataclass(frozen=True)
class Scene:
    """
    Root hittable, camera and background. Built once, read-only while
    rendering.
    """
    world: Hittable
    camera: Camera
    background: Background = field(default_factory=GradientBackground)

    def __post_init__(self):
        if not hasattr(self.world, "hit"):
            raise ValueError(f"Scene world must be a Hittable, got {type(self.world).__name__}")
        if not callable(self.background):
            raise ValueError("Scene background must be callable with a ray direction")
