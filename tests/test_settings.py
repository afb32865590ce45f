"""Unit tests for render settings."""

import os

import pytest

from pathtracer.renderer.settings import QUALITY_LEVELS, RenderSettings


class TestRenderSettings:
    def test_defaults(self):
        settings = RenderSettings(width=40, height=20)
        assert settings.samples_per_pixel == 10
        assert settings.max_depth == 50
        assert settings.workers == 1
        assert settings.jitter is True
        assert settings.aspect_ratio == 2.0

    @pytest.mark.parametrize("kwargs", [
        {"width": 0, "height": 10},
        {"width": 10, "height": -1},
        {"width": 10, "height": 10, "samples_per_pixel": 0},
        {"width": 10, "height": 10, "max_depth": -1},
        {"width": 10, "height": 10, "workers": 0},
        {"width": 10, "height": 10, "t_min": -0.1},
        {"width": 10, "height": 10, "seed": -5},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RenderSettings(**kwargs)

    def test_worker_count(self):
        assert RenderSettings(width=1, height=1, workers=3).worker_count == 3
        assert RenderSettings(width=1, height=1, workers=None).worker_count == (os.cpu_count() or 1)

    def test_from_quality(self):
        settings = RenderSettings.from_quality("preview", 32, 16, seed=7)
        assert settings.samples_per_pixel == QUALITY_LEVELS["preview"]["samples_per_pixel"]
        assert settings.max_depth == QUALITY_LEVELS["preview"]["max_depth"]
        assert settings.seed == 7

        custom = RenderSettings.from_quality("high_quality", 32, 16, max_depth=3)
        assert custom.max_depth == 3

        with pytest.raises(ValueError, match="Unknown quality level"):
            RenderSettings.from_quality("ultra", 32, 16)

    def test_with_overrides_is_a_copy(self):
        base = RenderSettings(width=8, height=8, seed=1)
        changed = base.with_overrides(seed=2, workers=4)
        assert (base.seed, base.workers) == (1, 1)
        assert (changed.seed, changed.workers) == (2, 4)

    def test_frozen(self):
        settings = RenderSettings(width=8, height=8)
        with pytest.raises(AttributeError):
            settings.width = 16
