"""Shared math helpers for the sdfshade package.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructors**: :func:`vec2`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`clamp`
* **Shader helpers** (GLSL semantics): :func:`mix`, :func:`smoothstep`

All functions accept scalars or ``numpy.ndarray`` objects and broadcast
over arbitrary leading batch dimensions.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2",
    "length", "dot", "clamp",
    "mix", "smoothstep",
]


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
    return np.stack([x, y], axis=-1)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.sqrt(dot(v, v))


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


# ===========================================================================
# Shader helpers
# ===========================================================================

def mix(a: _F, b: _F, t: _F) -> _F:
    """Linear blend ``a*(1-t) + b*t``.

    Written in the two-product form so that ``t == 0`` returns *a* and
    ``t == 1`` returns *b* exactly.
    """
    return a * (1.0 - t) + b * t


def smoothstep(edge0: float, edge1: float, x: _F) -> _F:
    """Cubic Hermite step from 0 at *edge0* to 1 at *edge1*."""
    t = clamp((np.asarray(x, dtype=float) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)
