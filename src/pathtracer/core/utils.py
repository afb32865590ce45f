# core/utils.py
"""
Sampling and optics helpers.

Every sampling function takes the caller's ``rng`` (a ``random.Random``
instance) so each render worker owns its own stream.
"""
import math
from pathtracer.core.vector import Vector3


def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    """
    Returns a vector with each component drawn uniformly from [lo, hi).
    """
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points very close to the center normalize badly.
        if p.dot(p) > 1e-160:
            return p.normalize()


def random_in_hemisphere(normal: Vector3, rng) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around ``normal``.
    """
    v = random_unit_vector(rng)
    return v if v.dot(normal) > 0.0 else -v


def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in the unit disk on the xy plane."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def random_cosine_direction(rng) -> Vector3:
    """
    Cosine-weighted direction around +z.
    """
    r1 = rng.random()
    r2 = rng.random()
    phi = 2.0 * math.pi * r1
    sqrt_r2 = math.sqrt(r2)
    return Vector3(math.cos(phi) * sqrt_r2, math.sin(phi) * sqrt_r2, math.sqrt(1.0 - r2))


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Snell refraction of the unit vector ``uv`` through a surface with
    unit normal ``n``. ``eta_ratio`` is eta_incident / eta_transmitted.

    Callers must check for total internal reflection first.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
