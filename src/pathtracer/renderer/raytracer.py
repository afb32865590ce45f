# renderer/raytracer.py
import logging
import math
import multiprocessing as mp
import random
import time
from typing import List, Tuple
import numpy as np
from pathtracer.core.vector import Color
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.scene import Scene
from pathtracer.renderer.settings import RenderSettings
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Rows handed to a worker per task; several tasks per worker balance the load.
CHUNKS_PER_WORKER = 4

# Scene and settings installed once per worker process by the pool initializer.
_worker_state = {}


def row_rng(seed: int, row: int) -> random.Random:
    """
    Independent random stream for one image row, derived from the render
    seed so results do not depend on which worker renders the row.
    """
    hi, lo = np.random.SeedSequence([seed, row]).generate_state(2, dtype=np.uint64)
    return random.Random((int(hi) << 64) | int(lo))


def render_row(scene: Scene, settings: RenderSettings, row: int, seed: int) -> np.ndarray:
    """
    Linear (not gamma corrected) average radiance for every pixel of one
    row. Row 0 is the top of the image.
    """
    rng = row_rng(seed, row)
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    camera = scene.camera
    y = height - 1 - row

    out = np.empty((width, 3), dtype=np.float64)
    for x in range(width):
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(spp):
            if settings.jitter:
                dx, dy = rng.random(), rng.random()
            else:
                dx = dy = 0.5
            s = (x + dx) / width
            t = (y + dy) / height
            ray = camera.get_ray(s, t, rng)
            pixel_color = pixel_color + ray_color(ray, scene, settings.max_depth, rng, settings.t_min)
        out[x] = (pixel_color.x / spp, pixel_color.y / spp, pixel_color.z / spp)
    return out


def _init_worker(scene: Scene, settings: RenderSettings):
    _worker_state["scene"] = scene
    _worker_state["settings"] = settings


def _render_chunk(task: Tuple[int, int, int]) -> Tuple[int, np.ndarray]:
    y_start, y_end, seed = task
    scene = _worker_state["scene"]
    settings = _worker_state["settings"]
    rows = np.stack([render_row(scene, settings, row, seed) for row in range(y_start, y_end)])
    return y_start, rows


class Renderer:
    """
    Monte Carlo path tracing render loop.

    Each pixel averages ``samples_per_pixel`` sub-pixel samples (uniform
    random jitter, or pixel centers when ``jitter`` is off) and the
    result is gamma corrected with a square root per channel.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.last_seed = None
        self.last_render_time = None

    def render(self, scene: Scene) -> np.ndarray:
        """
        Renders ``scene`` into a ``(height, width, 3)`` float array of
        gamma-corrected colors, row 0 at the top.
        """
        settings = self.settings
        seed = settings.seed
        if seed is None:
            seed = np.random.SeedSequence().entropy
        self.last_seed = seed

        if not math.isclose(scene.camera.aspect_ratio, settings.aspect_ratio, rel_tol=1e-3):
            logger.warning("Camera aspect ratio %.4f does not match image aspect ratio %.4f",
                           scene.camera.aspect_ratio, settings.aspect_ratio)

        workers = min(settings.worker_count, settings.height)
        logger.info("Rendering %dx%d, %d spp, depth %d, %d worker(s), seed %d",
                    settings.width, settings.height, settings.samples_per_pixel,
                    settings.max_depth, workers, seed)
        start = time.perf_counter()

        linear = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        if workers == 1:
            for row in range(settings.height):
                linear[row] = render_row(scene, settings, row, seed)
        else:
            self._render_parallel(scene, linear, workers, seed)

        self.last_render_time = time.perf_counter() - start
        logger.info("Render complete in %.2fs", self.last_render_time)
        return gamma_correct(linear)

    def _render_parallel(self, scene: Scene, linear: np.ndarray, workers: int, seed: int):
        height = self.settings.height
        rows_per_chunk = max(1, height // (workers * CHUNKS_PER_WORKER))
        tasks: List[Tuple[int, int, int]] = [
            (y_start, min(y_start + rows_per_chunk, height), seed)
            for y_start in range(0, height, rows_per_chunk)
        ]
        logger.debug("Divided %d rows into %d chunks of ~%d rows", height, len(tasks), rows_per_chunk)

        with mp.Pool(workers, initializer=_init_worker, initargs=(scene, self.settings)) as pool:
            for y_start, rows in pool.imap_unordered(_render_chunk, tasks):
                # Chunks cover disjoint row ranges.
                linear[y_start:y_start + rows.shape[0]] = rows
                logger.debug("Rows %d-%d done", y_start, y_start + rows.shape[0] - 1)


def render(scene: Scene, settings: RenderSettings) -> np.ndarray:
    """Convenience wrapper around ``Renderer(settings).render(scene)``."""
    return Renderer(settings).render(scene)
