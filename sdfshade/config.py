"""Render and sampling configuration for sdfshade.

Every constant the core needs lives on a :class:`RenderConfig`.  The
render/grid divisibility rule is checked once, when the configuration is
built, so nothing downstream has to re-check it per sample.

Defaults
--------
========================  ===============
``DEFAULT_RENDER``        800 x 450 px
``DEFAULT_GRID``          200 x 225 cells
``DEFAULT_WINDOW``        1920 x 1080 px
``DEFAULT_RADIUS``        0.5
``DEFAULT_BIAS``          1e-4
``DEFAULT_PROBE_STEP``    1e-5
========================  ===============
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Tuple


class ResolutionError(ValueError):
    """Raised when a resolution is non-positive or render/grid sizes disagree."""


class Resolution(NamedTuple):
    """Integer ``(width, height)`` pair in pixels or grid cells."""

    width: int
    height: int


DEFAULT_RENDER = Resolution(800, 450)
DEFAULT_GRID = Resolution(200, 225)
DEFAULT_WINDOW = Resolution(1920, 1080)
DEFAULT_RADIUS = 0.5
DEFAULT_BIAS = 1e-4
DEFAULT_PROBE_STEP = 1e-5


def _as_resolution(value: Tuple[int, int], name: str) -> Resolution:
    w, h = value
    if int(w) != w or int(h) != h:
        raise ResolutionError(f"{name} must be integers, got {w} x {h}")
    w, h = int(w), int(h)
    if w <= 0 or h <= 0:
        raise ResolutionError(f"{name} must be positive, got {w} x {h}")
    return Resolution(w, h)


class RenderConfig:
    """Immutable bundle of render, grid and probe constants.

    Parameters
    ----------
    render:
        ``(width, height)`` of the shaded image in pixels.
    grid:
        ``(width, height)`` of the coarse gradient-sampling grid in cells.
        Each render dimension must be an exact multiple of the matching
        grid dimension.
    radius:
        Circle radius in shading-space units.
    bias:
        Offset added to both shading-space axes by the coordinate mapper.
    probe_step:
        Shading-space step used by finite-difference probing.
    window:
        ``(width, height)`` of the host window, used only to scale mouse
        positions into render pixels.

    Raises
    ------
    ResolutionError
        If a dimension is non-positive or not divisible.
    """

    __slots__ = ("_render", "_grid", "_window", "_radius", "_bias", "_probe_step")

    def __init__(
        self,
        render: Tuple[int, int] = DEFAULT_RENDER,
        grid: Tuple[int, int] = DEFAULT_GRID,
        radius: float = DEFAULT_RADIUS,
        bias: float = DEFAULT_BIAS,
        probe_step: float = DEFAULT_PROBE_STEP,
        window: Optional[Tuple[int, int]] = None,
    ) -> None:
        render = _as_resolution(render, "render resolution")
        grid = _as_resolution(grid, "grid resolution")
        window = _as_resolution(window if window is not None else DEFAULT_WINDOW, "window size")

        if render.width % grid.width != 0:
            raise ResolutionError(
                f"render width {render.width} is not a multiple of grid width {grid.width}"
            )
        if render.height % grid.height != 0:
            raise ResolutionError(
                f"render height {render.height} is not a multiple of grid height {grid.height}"
            )
        if probe_step <= 0.0:
            raise ValueError(f"probe_step must be positive, got {probe_step}")

        self._render = render
        self._grid = grid
        self._window = window
        self._radius = float(radius)
        self._bias = float(bias)
        self._probe_step = float(probe_step)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def render(self) -> Resolution:
        return self._render

    @property
    def grid(self) -> Resolution:
        return self._grid

    @property
    def window(self) -> Resolution:
        return self._window

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def bias(self) -> float:
        return self._bias

    @property
    def probe_step(self) -> float:
        return self._probe_step

    @property
    def cell_size(self) -> Resolution:
        """Render pixels covered by one grid cell, ``(cw, ch)``."""
        return Resolution(self._render.width // self._grid.width,
                          self._render.height // self._grid.height)

    @property
    def arrow_length(self) -> float:
        """Diagonal of one grid cell in render pixels."""
        cw, ch = self.cell_size
        return math.sqrt(cw * cw + ch * ch)

    # ------------------------------------------------------------------
    # Reconfiguration
    # ------------------------------------------------------------------

    def with_grid(self, width: int, height: int) -> RenderConfig:
        """Return a copy using a new grid resolution (re-validated)."""
        return RenderConfig(self._render, (width, height), self._radius,
                            self._bias, self._probe_step, self._window)

    def with_render(self, width: int, height: int) -> RenderConfig:
        """Return a copy using a new render resolution (re-validated)."""
        return RenderConfig((width, height), self._grid, self._radius,
                            self._bias, self._probe_step, self._window)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderConfig):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self):
        return (self._render, self._grid, self._window,
                self._radius, self._bias, self._probe_step)

    def __repr__(self) -> str:
        return (
            f"RenderConfig(render={tuple(self._render)}, grid={tuple(self._grid)}, "
            f"radius={self._radius}, bias={self._bias}, "
            f"probe_step={self._probe_step}, window={tuple(self._window)})"
        )
