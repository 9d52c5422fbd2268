"""Distance + gradient to color.

The pipeline runs five tone stages in a fixed order and clamps the
result to ``[0, 1]``:

1. :func:`region_color`   -- warm outside, cool inside
2. :func:`gradient_tint`  -- red/green scaled by the gradient direction
3. :func:`rim_darkening`  -- dark halo decaying away from the boundary
4. :func:`distance_bands` -- periodic iso-distance contours
5. :func:`edge_blend`     -- wash toward white inside a thin boundary band

Reordering the stages changes the image.  Each stage takes and returns a
``(..., 3)`` color array, so they can also be applied one at a time.

Inputs must be finite and the gradient unit length.  A gradient taken at
the distance-field origin is non-finite and propagates NaN into the color.
"""

from __future__ import annotations

import numpy as np

from ._math import _F, clamp, mix, smoothstep

OUTSIDE_COLOR = np.array([0.9, 0.6, 0.3])
INSIDE_COLOR = np.array([0.4, 0.7, 0.85])

TINT_STRENGTH = 0.5
RIM_STRENGTH = 0.5
RIM_DECAY = 16.0
BAND_BASE = 0.9
BAND_AMPLITUDE = 0.1
BAND_FREQUENCY = 150.0
EDGE_WIDTH = 0.01
EDGE_COLOR = 1.0


def region_color(d: _F) -> _F:
    """Base color: :data:`OUTSIDE_COLOR` where ``d > 0``, else :data:`INSIDE_COLOR`."""
    d = np.asarray(d, dtype=float)
    return np.where(np.expand_dims(d > 0.0, -1), OUTSIDE_COLOR, INSIDE_COLOR)


def gradient_tint(col: _F, g: _F) -> _F:
    """Scale red by ``1 + 0.5*gx`` and green by ``1 + 0.5*gy``."""
    g = np.asarray(g, dtype=float)
    scale = np.stack(
        np.broadcast_arrays(
            1.0 + TINT_STRENGTH * g[..., 0],
            1.0 + TINT_STRENGTH * g[..., 1],
            np.ones_like(g[..., 0]),
        ),
        axis=-1,
    )
    return col * scale


def rim_darkening(col: _F, d: _F) -> _F:
    """Multiply by ``1 - 0.5*exp(-16*|d|)``."""
    k = 1.0 - RIM_STRENGTH * np.exp(-RIM_DECAY * np.abs(d))
    return col * np.expand_dims(k, -1)


def distance_bands(col: _F, d: _F) -> _F:
    """Multiply by ``0.9 + 0.1*cos(150*d)``."""
    k = BAND_BASE + BAND_AMPLITUDE * np.cos(BAND_FREQUENCY * np.asarray(d, dtype=float))
    return col * np.expand_dims(k, -1)


def edge_blend(col: _F, d: _F) -> _F:
    """Blend toward white with weight ``1 - smoothstep(0, 0.01, |d|)``."""
    t = 1.0 - smoothstep(0.0, EDGE_WIDTH, np.abs(d))
    return mix(col, EDGE_COLOR, np.expand_dims(t, -1))


def shade(d: _F, g: _F) -> _F:
    """Color for distance *d* ``(...,)`` and gradient *g* ``(..., 2)``.

    Returns a ``(..., 3)`` RGB array with every channel in ``[0, 1]``.
    """
    d = np.asarray(d, dtype=float)
    col = region_color(d)
    col = gradient_tint(col, g)
    col = rim_darkening(col, d)
    col = distance_bands(col, d)
    col = edge_blend(col, d)
    return clamp(col, 0.0, 1.0)
