"""Tests for sdfshade.config."""

import math

import pytest

from sdfshade import RenderConfig, Resolution, ResolutionError
from sdfshade.config import DEFAULT_GRID, DEFAULT_RENDER


class TestDefaults:
    def test_default_resolutions(self):
        cfg = RenderConfig()
        assert cfg.render == Resolution(800, 450)
        assert cfg.grid == Resolution(200, 225)
        assert cfg.window == Resolution(1920, 1080)

    def test_default_constants(self):
        cfg = RenderConfig()
        assert cfg.radius == 0.5
        assert cfg.bias == 1e-4
        assert cfg.probe_step == 1e-5

    def test_defaults_are_divisible(self):
        assert DEFAULT_RENDER.width % DEFAULT_GRID.width == 0
        assert DEFAULT_RENDER.height % DEFAULT_GRID.height == 0


class TestDerived:
    def test_cell_size(self):
        assert RenderConfig().cell_size == (4, 2)

    def test_arrow_length(self):
        assert RenderConfig().arrow_length == pytest.approx(math.sqrt(20.0))


class TestValidation:
    def test_indivisible_width_rejected(self):
        with pytest.raises(ResolutionError):
            RenderConfig(render=(800, 450), grid=(199, 225))

    def test_indivisible_height_rejected(self):
        with pytest.raises(ResolutionError):
            RenderConfig(render=(800, 450), grid=(200, 200))

    def test_reconfigure_grid_rejected(self):
        cfg = RenderConfig(render=(800, 450), grid=(200, 225))
        with pytest.raises(ResolutionError, match="199"):
            cfg.with_grid(199, 225)

    def test_reconfigure_grid_accepted(self):
        cfg = RenderConfig().with_grid(100, 75)
        assert cfg.grid == (100, 75)
        assert cfg.cell_size == (8, 6)

    def test_reconfigure_render_rejected(self):
        with pytest.raises(ResolutionError):
            RenderConfig().with_render(801, 450)

    def test_non_positive_rejected(self):
        with pytest.raises(ResolutionError):
            RenderConfig(render=(0, 450))
        with pytest.raises(ResolutionError):
            RenderConfig(grid=(-200, 225))

    def test_non_integer_rejected(self):
        with pytest.raises(ResolutionError):
            RenderConfig(render=(800.5, 450))

    def test_is_value_error(self):
        assert issubclass(ResolutionError, ValueError)

    def test_probe_step_positive(self):
        with pytest.raises(ValueError):
            RenderConfig(probe_step=0.0)


class TestEquality:
    def test_equal_configs(self):
        assert RenderConfig() == RenderConfig()
        assert hash(RenderConfig()) == hash(RenderConfig())

    def test_different_configs(self):
        assert RenderConfig() != RenderConfig(radius=0.25)

    def test_repr(self):
        assert "render=(800, 450)" in repr(RenderConfig())
