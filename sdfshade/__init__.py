"""
sdfshade: 2D Signed Distance Field Shading
==========================================

Evaluate a 2D signed distance field on a raster, shade it from its
distance and gradient, and sample the gradient on a coarse grid for
inspection.

Implemented features
--------------------
- Coordinate mapping: :class:`CoordinateMapper`, :func:`screen_space_coords`
- Distance + gradient fields: :class:`DistanceField2D`, :class:`Circle2D`
- Shading: :func:`shade` (region color, tint, rim, bands, edge blend)
- Rendering: :func:`render_image`, :func:`pixel_shader`, :func:`to_rgba8`
- Gradient grid: :func:`sample_grid`, :func:`arrow_segments`
- Finite-difference probing: :func:`probe_gradient`

Quick start
-----------

::

    from sdfshade import RenderConfig, Circle2D, render_image, sample_grid
    from sdfshade import probe_gradient

    config = RenderConfig(render=(800, 450), grid=(200, 225), radius=0.5)
    circle = Circle2D(config.radius)

    image    = render_image(circle, config)          # (450, 800, 3)
    sampling = sample_grid(circle, config)           # (225, 200) samples
    probe    = probe_gradient(400, 100, circle, config)
"""

from .config import (
    DEFAULT_BIAS,
    DEFAULT_GRID,
    DEFAULT_PROBE_STEP,
    DEFAULT_RADIUS,
    DEFAULT_RENDER,
    DEFAULT_WINDOW,
    RenderConfig,
    Resolution,
    ResolutionError,
)
from .coords import CoordinateMapper, screen_space_coords, window_to_texture
from .geometry import Circle2D, DistanceField2D, DistanceSample
from .shading import shade
from .render import pixel_shader, render_image, to_rgba8
from .sampler import (
    GRID_SAMPLE_DTYPE,
    GridSampling,
    arrow_segments,
    normalize_distances,
    sample_grid,
)
from .probe import DebugProbe, probe_gradient

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "RenderConfig",
    "Resolution",
    "ResolutionError",
    "DEFAULT_RENDER",
    "DEFAULT_GRID",
    "DEFAULT_WINDOW",
    "DEFAULT_RADIUS",
    "DEFAULT_BIAS",
    "DEFAULT_PROBE_STEP",

    # Coordinates
    "CoordinateMapper",
    "screen_space_coords",
    "window_to_texture",

    # Distance fields
    "DistanceField2D",
    "DistanceSample",
    "Circle2D",

    # Shading and rendering
    "shade",
    "pixel_shader",
    "render_image",
    "to_rgba8",

    # Gradient inspection
    "GRID_SAMPLE_DTYPE",
    "GridSampling",
    "sample_grid",
    "normalize_distances",
    "arrow_segments",
    "DebugProbe",
    "probe_gradient",
]
