"""CPU Monte Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes, transforms and sampling helpers
    geometry: primitives, containers and the bounding volume hierarchy
    materials: scattering models and textures
    camera: thin-lens camera ray generation
    renderer: integrator, render loop and settings
"""
from pathtracer.core import AABB, Color, Matrix4x4, Ray, UV, Vector3
from pathtracer.camera import Camera
from pathtracer.geometry import (
    BVHNode,
    HitRecord,
    Hittable,
    HittableList,
    MovingSphere,
    Sphere,
    Triangle,
    TriangleMesh,
    XYRect,
    XZRect,
    YZRect,
    load_obj,
)
from pathtracer.materials import (
    ABSORBED,
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    Emitted,
    ImageTexture,
    Lambertian,
    Material,
    Metal,
    Scattered,
    SolidColor,
    Texture,
    load_texture,
)
from pathtracer.renderer import (
    GradientBackground,
    RenderSettings,
    Renderer,
    Scene,
    SolidBackground,
    ray_color,
    render,
)

__version__ = "0.1.0"
