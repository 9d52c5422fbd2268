"""Tests for sdfshade.render: full-resolution shading."""

import numpy as np
import numpy.testing as npt

from sdfshade import Circle2D, RenderConfig, pixel_shader, render_image, to_rgba8


def _small_config() -> RenderConfig:
    return RenderConfig(render=(80, 45), grid=(20, 15))


class TestRenderImage:
    def test_shape(self):
        assert render_image(config=_small_config()).shape == (45, 80, 3)

    def test_range(self):
        img = render_image(config=_small_config())
        assert img.min() >= 0.0
        assert img.max() <= 1.0

    def test_pixels_match_pixel_shader(self):
        cfg = _small_config()
        img = render_image(Circle2D(cfg.radius), cfg)
        for x, y in [(0, 0), (40, 22), (79, 44), (55, 10)]:
            npt.assert_allclose(img[y, x], pixel_shader(x, y, config=cfg), rtol=1e-12)

    def test_centre_is_inside_color(self):
        img = render_image(config=_small_config())
        r, g, b = img[22, 40]
        assert b > r

    def test_deterministic(self):
        cfg = _small_config()
        npt.assert_array_equal(render_image(config=cfg), render_image(config=cfg))

    def test_radius_changes_image(self):
        a = render_image(Circle2D(0.5), _small_config())
        b = render_image(Circle2D(0.25), _small_config())
        assert not np.array_equal(a, b)


class TestPixelShader:
    def test_vectorised(self):
        xs = np.array([0, 100, 400])
        rgb = pixel_shader(xs, 225)
        assert rgb.shape == (3, 3)
        npt.assert_allclose(rgb[1], pixel_shader(100, 225), rtol=1e-12)


class TestToRgba8:
    def test_truncates(self):
        out = to_rgba8(np.array([[1.0, 0.5, 0.0]]))
        assert out.dtype == np.uint8
        npt.assert_array_equal(out, [[255, 127, 0, 255]])

    def test_image_shape(self):
        out = to_rgba8(np.zeros((4, 6, 3)))
        assert out.shape == (4, 6, 4)
        assert (out[..., 3] == 255).all()
