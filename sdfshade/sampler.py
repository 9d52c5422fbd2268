"""Coarse-grid gradient sampling for vector-field overlays."""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from .config import RenderConfig
from .coords import CoordinateMapper
from .geometry import Circle2D, DistanceField2D

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]

#: One grid cell: plot-space origin, gradient direction, signed distance.
GRID_SAMPLE_DTYPE = np.dtype([
    ("ox", np.float64),
    ("oy", np.float64),
    ("dx", np.float64),
    ("dy", np.float64),
    ("dist", np.float64),
])


class GridSampling(NamedTuple):
    """Result of :func:`sample_grid`.

    ``samples`` is a read-only ``(gridH, gridW)`` structured array of
    :data:`GRID_SAMPLE_DTYPE`, row-major (cell ``(i, j)`` is
    ``samples[j, i]``).  ``min_dist`` / ``max_dist`` are the extremes of
    ``samples["dist"]``.
    """

    samples: np.ndarray
    min_dist: float
    max_dist: float


def sample_grid(
    field: Optional[DistanceField2D] = None,
    config: Optional[RenderConfig] = None,
) -> GridSampling:
    """Evaluate *field* once per coarse grid cell.

    Cell ``(i, j)`` is represented by its top-left raster pixel
    ``(i*cw, j*ch)`` where ``(cw, ch)`` is :attr:`RenderConfig.cell_size`.
    The stored origin uses plot convention, ``oy = H - y``.

    Distances are stored as evaluated; see :func:`normalize_distances` for
    optional rescaling.
    """
    config = config if config is not None else RenderConfig()
    field = field if field is not None else Circle2D(config.radius)
    gw, gh = config.grid
    cw, ch = config.cell_size

    J, I = np.meshgrid(np.arange(gh), np.arange(gw), indexing="ij")
    x = I * cw
    y = J * ch
    sample = field.evaluate(CoordinateMapper(config).map(x, y))

    samples = np.empty((gh, gw), dtype=GRID_SAMPLE_DTYPE)
    samples["ox"] = x
    samples["oy"] = config.render.height - y
    samples["dx"] = sample.gx
    samples["dy"] = sample.gy
    samples["dist"] = sample.distance
    samples.flags.writeable = False

    min_dist = float(np.min(samples["dist"]))
    max_dist = float(np.max(samples["dist"]))
    logger.debug("Sampled %dx%d grid, dist range [%g, %g]", gw, gh, min_dist, max_dist)
    return GridSampling(samples, min_dist, max_dist)


def normalize_distances(sampling: GridSampling) -> np.ndarray:
    """Return a copy of ``sampling.samples`` with ``dist`` rescaled to ``[0, 1]``.

    Uses the observed ``min_dist`` / ``max_dist``.  Not applied by
    :func:`sample_grid`.

    Raises
    ------
    ValueError
        If the grid is empty or all distances are equal.
    """
    if sampling.samples.size == 0:
        raise ValueError("cannot normalize an empty grid")
    span = sampling.max_dist - sampling.min_dist
    if span == 0.0:
        raise ValueError("cannot normalize a grid with a single distance value")
    out = sampling.samples.copy()
    out["dist"] = (out["dist"] - sampling.min_dist) / span
    return out


def arrow_segments(samples: np.ndarray, line_length: float) -> _Array:
    """Line segments drawing each grid sample as an arrow.

    The shaft runs from ``(ox, oy)`` to ``origin + (dx, dy) * dist *
    line_length``.  The head is two strokes from the tip to
    ``base ± normal``, with ``base = tip - 0.2 * shaft`` and
    ``normal = 0.1 * (-shaft_y, shaft_x)``.

    Returns
    -------
    numpy.ndarray
        Shape ``(..., 3, 2, 2)``: (shaft, head-left, head-right) x
        (start, end) x (x, y), in plot coordinates.
    """
    origin = np.stack([samples["ox"], samples["oy"]], axis=-1)
    direction = np.stack([samples["dx"], samples["dy"]], axis=-1)
    tip = origin + direction * (samples["dist"] * line_length)[..., None]

    shaft = tip - origin
    normal = 0.1 * np.stack([-shaft[..., 1], shaft[..., 0]], axis=-1)
    base = tip - 0.2 * shaft

    return np.stack([
        np.stack([origin, tip], axis=-2),
        np.stack([tip, base + normal], axis=-2),
        np.stack([tip, base - normal], axis=-2),
    ], axis=-3)
