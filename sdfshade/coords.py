"""Raster-to-shading-space coordinate mapping."""

from __future__ import annotations

import numpy as np

from ._math import _F, vec2
from .config import RenderConfig


def screen_space_coords(x: _F, y: _F, width: float, height: float, bias: float) -> _F:
    """Map raster pixel ``(x, y)`` to a ``(..., 2)`` shading-space point.

    The raster y axis grows downward and is flipped so shading space grows
    upward.  Both axes are divided by *height*, which keeps the aspect ratio
    and puts the image centre at the origin.  *bias* is added to both axes
    so integer pixels never land exactly on ``(0, 0)``.
    """
    cx = np.asarray(x, dtype=float)
    cy = height - np.asarray(y, dtype=float)
    px = (2.0 * cx - width) / height + bias
    py = (2.0 * cy - height) / height + bias
    return vec2(px, py)


def window_to_texture(wx: _F, wy: _F, config: RenderConfig) -> _F:
    """Scale window (mouse) coordinates into render-resolution pixels."""
    win = config.window
    ren = config.render
    tx = np.asarray(wx, dtype=float) / win.width * ren.width
    ty = np.asarray(wy, dtype=float) / win.height * ren.height
    return vec2(tx, ty)


class CoordinateMapper:
    """Raster-to-shading-space mapper bound to one :class:`RenderConfig`."""

    def __init__(self, config: RenderConfig) -> None:
        self.config = config

    def map(self, x: _F, y: _F) -> _F:
        """Shading-space point for raster pixel ``(x, y)``."""
        ren = self.config.render
        return screen_space_coords(x, y, ren.width, ren.height, self.config.bias)

    def __call__(self, x: _F, y: _F) -> _F:
        return self.map(x, y)

    def pixel_grid(self) -> _F:
        """Shading-space points for every render pixel, shape ``(H, W, 2)``."""
        ren = self.config.render
        Y, X = np.meshgrid(np.arange(ren.height), np.arange(ren.width), indexing="ij")
        return self.map(X, Y)
