"""Closed-form distance + gradient functions.

Each ``sdg*`` function takes a ``(..., 2)`` point array and returns a pair
``(d, g)``: the signed distance, shape ``(...,)``, and its gradient,
shape ``(..., 2)``.  Any new primitive only has to honour that contract
for the shading pipeline to accept it.

Formula adapted from Inigo Quilez's distance + gradient reference:
https://iquilezles.org/articles/distgradfunctions2d/
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ._math import _F, length


def sdgCircle(p: _F, r: float) -> Tuple[_F, _F]:
    """Circle of radius *r* centred at origin.

    The gradient is the outward unit normal ``p / |p|``.  It is undefined
    at ``p == (0, 0)``; NumPy then yields non-finite components.
    """
    p = np.asarray(p, dtype=float)
    l = length(p)
    return l - r, p / np.expand_dims(l, -1)
