"""2D distance-field objects: distance and gradient behind one interface."""

from __future__ import annotations

from typing import Callable, NamedTuple, Tuple

import numpy as np
import numpy.typing as npt

from . import primitives as sdg

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDGFunc = Callable[[_Array], Tuple[_Array, _Array]]


class DistanceSample(NamedTuple):
    """Signed distance and gradient at one or more shading-space points.

    ``distance`` has shape ``(...,)``: negative inside, positive outside,
    zero on the boundary.  ``gradient`` has shape ``(..., 2)``.
    """

    distance: _Array
    gradient: _Array

    @property
    def gx(self) -> _Array:
        return self.gradient[..., 0]

    @property
    def gy(self) -> _Array:
        return self.gradient[..., 1]


# ===========================================================================
# Base class
# ===========================================================================

class DistanceField2D:
    """A 2D signed distance field that also reports its gradient.

    A ``DistanceField2D`` wraps a callable ``func(p) -> (d, g)`` where *p*
    is a ``(..., 2)`` array of shading-space points.  The shading pipeline
    only sees the returned :class:`DistanceSample`, so a new shape is added
    by passing a different ``func``; nothing downstream changes.

    Subclasses override ``__init__`` to pass the appropriate primitive to
    ``super().__init__(func)``.
    """

    def __init__(self, func: _SDGFunc) -> None:
        self._func = func

    def evaluate(self, p: _Array) -> DistanceSample:
        """Distance and gradient at *p* (shape ``(..., 2)``)."""
        d, g = self._func(p)
        return DistanceSample(d, g)

    def __call__(self, p: _Array) -> DistanceSample:
        return self.evaluate(p)

    def sdf(self, p: _Array) -> _Array:
        """Signed distance only."""
        return self.evaluate(p).distance

    def gradient(self, p: _Array) -> _Array:
        """Gradient only, shape ``(..., 2)``."""
        return self.evaluate(p).gradient

    @staticmethod
    def circle(radius: float) -> DistanceField2D:
        """Circle field built from :func:`~sdfshade.primitives.sdgCircle`."""
        r = float(radius)
        return DistanceField2D(lambda p: sdg.sdgCircle(p, r))


# ===========================================================================
# Primitive shapes
# ===========================================================================

class Circle2D(DistanceField2D):
    """Circle centred at origin with given *radius*."""

    def __init__(self, radius: float) -> None:
        self.radius = float(radius)
        super().__init__(lambda p: sdg.sdgCircle(p, self.radius))
