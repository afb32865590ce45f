# scenes.py
"""Ready-made scenes for examples, benchmarks and tests."""
import random
from typing import Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets, TexturePresets
from pathtracer.renderer.background import GradientBackground, SolidBackground
from pathtracer.renderer.scene import Scene


def single_sphere_scene(aspect_ratio: float = 1.0) -> Scene:
    """One diffuse sphere of radius 0.5 at (0, 0, -1) seen from the origin."""
    world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Color(0.5, 0.5, 0.5)))])
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0),
                    vertical_fov=90.0, aspect_ratio=aspect_ratio)
    return Scene(world, camera, GradientBackground())


def random_spheres_scene(rng: Optional[random.Random] = None, aspect_ratio: float = 16.0 / 9.0,
                         grid: int = 11, motion_blur: bool = False) -> Scene:
    """
    A large ground sphere covered with a grid of small random spheres,
    plus three big glass, diffuse and metal spheres, wrapped in a BVH.

    With ``motion_blur`` the diffuse small spheres bounce upward during
    the shutter interval.
    """
    rng = rng or random.Random()
    objects = [Sphere(Vector3(0, -1000, 0), 1000, Lambertian(TexturePresets.checkerboard()))]

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            # Keep a lane clear around the three big spheres.
            if -1 < b < 1 and -6 < a < 6:
                continue
            center = Vector3(a + 0.5 * rng.random(), 0.2, b + 0.9 * rng.random())
            radius = 0.2
            choose_mat = rng.random()
            if choose_mat < 0.6:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
                if motion_blur:
                    center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                    objects.append(MovingSphere(center, center1, 0.0, 1.0, radius, material))
                    continue
            elif choose_mat < 0.8:
                material = Metal(random_vector(rng, 0.5, 1.0), rng.random())
            else:
                material = DielectricPresets.glass()
                if rng.random() < 0.5:
                    # Hollow bubble: an inner shell with inward normals.
                    objects.append(Sphere(center, -(radius - 0.02), material))
            objects.append(Sphere(center, radius, material))

    objects.append(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0),
                    vertical_fov=20.0, aspect_ratio=aspect_ratio,
                    aperture=0.1, focus_dist=10.0,
                    shutter_open=0.0, shutter_close=1.0 if motion_blur else 0.0)
    return Scene(BVHNode.build(objects), camera, GradientBackground())


def cornell_box_scene(aspect_ratio: float = 1.0) -> Scene:
    """
    Enclosed box lit only by a ceiling light, rendered against black.
    """
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)
    light = DiffuseLight(Color(15, 15, 15))

    world = HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(213, 343, 227, 332, 554, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
        Sphere(Vector3(190, 90, 190), 90, DielectricPresets.glass()),
        Sphere(Vector3(380, 100, 370), 100, MetalPresets.silver()),
    ])
    world.build_bvh()

    camera = Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0),
                    vertical_fov=40.0, aspect_ratio=aspect_ratio, focus_dist=10.0)
    return Scene(world, camera, SolidBackground(Color(0, 0, 0)))
