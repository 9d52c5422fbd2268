"""Finite-difference probing of the analytic gradient at a single pixel.

A probe evaluates the field at a raster pixel, then at the shading-space
points offset by ``step`` in ``+x``, ``+y`` and ``+x+y``.  For each offset
it records how far the gradient moved from the unperturbed gradient.  Two
further rows difference those rows pairwise:

====  =====================================
row   value
====  =====================================
0     ``g(p + (h, 0)) - g(p)``
1     ``g(p + (0, h)) - g(p)``
2     ``g(p + (h, h)) - g(p)``
3     ``row 2 - row 0``
4     ``row 2 - row 1``
====  =====================================

For a smooth field every row shrinks with ``h``; a large row flags a
kink or singularity near the probed pixel.  The output is diagnostic
only and never feeds back into shading.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from .config import RenderConfig
from .coords import CoordinateMapper
from .geometry import Circle2D, DistanceField2D
from .shading import shade

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]

DIFFERENCE_LABELS = ("+x", "+y", "+xy", "+xy-x", "+xy-y")


class DebugProbe(NamedTuple):
    """One on-demand gradient probe.

    ``x``/``y`` are the raster pixel as given (not flipped), ``point`` the
    shading-space point, ``differences`` a ``(5, 2)`` array laid out as
    described in the module docstring.
    """

    x: int
    y: int
    point: _Array
    distance: float
    gradient: _Array
    color: _Array
    differences: _Array

    @property
    def first_order(self) -> _Array:
        return self.differences[:3]

    @property
    def second_order(self) -> _Array:
        return self.differences[3:]

    def format_lines(self) -> list[str]:
        """Human-readable lines, one for the probe and one per difference row."""
        lines = [
            f"Pos ({self.x}, {self.y}) px {self.point[0]:f}, py {self.point[1]:f} "
            f"dir ({self.gradient[0]:f}, {self.gradient[1]:f}) dist {self.distance:f}"
        ]
        for label, (ddx, ddy) in zip(DIFFERENCE_LABELS, self.differences):
            lines.append(f"{label:>6}: ({ddx:e} {ddy:e})")
        return lines


def probe_gradient(
    x: int,
    y: int,
    field: Optional[DistanceField2D] = None,
    config: Optional[RenderConfig] = None,
) -> DebugProbe:
    """Probe the gradient of *field* around raster pixel ``(x, y)``.

    Fractional coordinates (e.g. from :func:`~sdfshade.coords.window_to_texture`)
    are truncated to the containing pixel before mapping, so the recorded
    pixel and the evaluated point always agree.
    """
    x, y = int(x), int(y)
    config = config if config is not None else RenderConfig()
    field = field if field is not None else Circle2D(config.radius)
    h = config.probe_step

    p = CoordinateMapper(config).map(x, y)
    base = field.evaluate(p)

    offsets = np.array([[h, 0.0], [0.0, h], [h, h]])
    moved = field.evaluate(p + offsets)

    differences = np.empty((5, 2))
    differences[:3] = moved.gradient - base.gradient
    differences[3] = differences[2] - differences[0]
    differences[4] = differences[2] - differences[1]

    probe = DebugProbe(
        x=x,
        y=y,
        point=p,
        distance=float(base.distance),
        gradient=base.gradient,
        color=shade(base.distance, base.gradient),
        differences=differences,
    )
    logger.debug("Probed pixel (%d, %d): dist %g", probe.x, probe.y, probe.distance)
    return probe
