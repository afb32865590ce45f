# renderer/integrator.py
import math
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.materials.material import Emitted, Scattered

# Hits closer than this to the ray origin are treated as self-intersections.
T_MIN = 1e-3

BLACK = Color(0.0, 0.0, 0.0)


def ray_color(ray: Ray, scene, depth: int, rng, t_min: float = T_MIN) -> Color:
    """
    Radiance carried back along ``ray``.

    Follows the path bounce by bounce until it escapes to the
    background, hits a light, is absorbed, or ``depth`` bounces are used
    up. Each scattering surface multiplies its attenuation into
    ``throughput``, which then scales the light found at the end of the
    path. Runs as a loop so large depths do not grow the call stack.
    """
    throughput = Color(1.0, 1.0, 1.0)
    for _ in range(depth):
        rec = scene.world.hit(ray, t_min, math.inf)
        if rec is None:
            return throughput * scene.background(ray.direction)

        result = rec.material.scatter(ray, rec, rng)
        if isinstance(result, Scattered):
            throughput = throughput * result.attenuation
            ray = result.ray
        elif isinstance(result, Emitted):
            return throughput * result.color
        else:
            return BLACK
    return BLACK
