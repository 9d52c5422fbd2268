"""Tests for sdfshade.coords: raster to shading-space mapping."""

import numpy as np
import numpy.testing as npt

from sdfshade import CoordinateMapper, RenderConfig, screen_space_coords, window_to_texture


def _mapper(**kw) -> CoordinateMapper:
    return CoordinateMapper(RenderConfig(**kw))


class TestScreenSpaceCoords:
    def test_centre_is_bias_only(self):
        p = _mapper().map(400, 225)
        npt.assert_allclose(p, [1e-4, 1e-4], atol=1e-15)

    def test_top_left(self):
        p = _mapper().map(0, 0)
        npt.assert_allclose(p, [-800.0 / 450.0 + 1e-4, 1.0 + 1e-4])

    def test_y_is_flipped(self):
        m = _mapper()
        assert m.map(400, 0)[1] > m.map(400, 449)[1]

    def test_height_is_common_scale(self):
        m = _mapper()
        dx = m.map(401, 225)[0] - m.map(400, 225)[0]
        dy = m.map(400, 224)[1] - m.map(400, 225)[1]
        npt.assert_allclose(dx, dy)

    def test_deterministic(self):
        m = _mapper()
        a = m.map(np.arange(800), 17)
        b = m.map(np.arange(800), 17)
        npt.assert_array_equal(a, b)

    def test_function_matches_mapper(self):
        npt.assert_array_equal(
            screen_space_coords(12, 34, 800, 450, 1e-4),
            _mapper().map(12, 34),
        )

    def test_zero_bias(self):
        npt.assert_array_equal(_mapper(bias=0.0).map(400, 225), [0.0, 0.0])

    def test_broadcast_shape(self):
        p = _mapper()(np.zeros((3, 4), dtype=int), 5)
        assert p.shape == (3, 4, 2)


class TestPixelGrid:
    def test_shape(self):
        grid = _mapper(render=(80, 45), grid=(20, 15)).pixel_grid()
        assert grid.shape == (45, 80, 2)

    def test_row_is_raster_y(self):
        m = _mapper(render=(80, 45), grid=(20, 15))
        npt.assert_array_equal(m.pixel_grid()[10, 30], m.map(30, 10))


class TestWindowToTexture:
    def test_window_centre(self):
        npt.assert_allclose(window_to_texture(960, 540, RenderConfig()), [400.0, 225.0])

    def test_window_corner(self):
        npt.assert_allclose(window_to_texture(1920, 1080, RenderConfig()), [800.0, 450.0])
