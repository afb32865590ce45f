# renderer/settings.py
import os
from dataclasses import dataclass, replace
from typing import Optional

# Named quality levels: samples per pixel and maximum bounce depth.
QUALITY_LEVELS = {
    "preview": {"samples_per_pixel": 4, "max_depth": 8},
    "balanced": {"samples_per_pixel": 32, "max_depth": 20},
    "high_quality": {"samples_per_pixel": 100, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    """
    Everything the render loop needs besides the scene itself.

    ``workers=None`` uses every available CPU. ``jitter=False`` samples
    pixel centers instead of random sub-pixel positions. ``seed`` makes
    renders bit-reproducible regardless of the worker count.
    """
    width: int
    height: int
    samples_per_pixel: int = 10
    max_depth: int = 50
    seed: Optional[int] = None
    workers: Optional[int] = 1
    jitter: bool = True
    t_min: float = 1e-3

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive or None, got {self.workers}")
        if not self.t_min >= 0:
            raise ValueError(f"t_min must be non-negative, got {self.t_min}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def worker_count(self) -> int:
        if self.workers is None:
            return os.cpu_count() or 1
        return self.workers

    @classmethod
    def from_quality(cls, name: str, width: int, height: int, **overrides) -> "RenderSettings":
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
        return cls(width=width, height=height, **{**quality, **overrides})

    def with_overrides(self, **changes) -> "RenderSettings":
        return replace(self, **changes)
