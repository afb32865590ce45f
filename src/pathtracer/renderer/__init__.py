"""Integrator, render loop and render configuration."""
from pathtracer.renderer.background import Background, GradientBackground, SolidBackground
from pathtracer.renderer.integrator import T_MIN, ray_color
from pathtracer.renderer.raytracer import Renderer, render, render_row
from pathtracer.renderer.scene import Scene
from pathtracer.renderer.settings import QUALITY_LEVELS, RenderSettings
from pathtracer.renderer.tone_mapping import gamma_correct, to_rgb8

__all__ = [
    "Background", "GradientBackground", "SolidBackground",
    "ray_color", "T_MIN",
    "Renderer", "render", "render_row",
    "Scene", "RenderSettings", "QUALITY_LEVELS",
    "gamma_correct", "to_rgb8",
]
