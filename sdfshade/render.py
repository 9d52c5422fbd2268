"""Full-resolution rendering of a distance field."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt

from .config import RenderConfig
from .coords import CoordinateMapper
from .geometry import Circle2D, DistanceField2D
from .shading import shade

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


def _field_for(field: Optional[DistanceField2D], config: RenderConfig) -> DistanceField2D:
    return field if field is not None else Circle2D(config.radius)


def pixel_shader(
    x: _Array,
    y: _Array,
    field: Optional[DistanceField2D] = None,
    config: Optional[RenderConfig] = None,
) -> _Array:
    """Shaded RGB for raster pixel(s) ``(x, y)``, shape ``(..., 3)``.

    *field* defaults to a circle of ``config.radius``; *config* defaults to
    :class:`RenderConfig()`.
    """
    config = config if config is not None else RenderConfig()
    p = CoordinateMapper(config).map(x, y)
    sample = _field_for(field, config).evaluate(p)
    return shade(sample.distance, sample.gradient)


def render_image(
    field: Optional[DistanceField2D] = None,
    config: Optional[RenderConfig] = None,
) -> _Array:
    """Shade every render pixel.

    Returns
    -------
    numpy.ndarray
        Shape ``(H, W, 3)`` float array; row index is the raster y.
    """
    config = config if config is not None else RenderConfig()
    p = CoordinateMapper(config).pixel_grid()
    sample = _field_for(field, config).evaluate(p)
    image = shade(sample.distance, sample.gradient)
    logger.debug("Rendered %dx%d image", config.render.width, config.render.height)
    return image


def to_rgba8(image: _Array) -> npt.NDArray[np.uint8]:
    """Convert a ``(..., 3)`` float image in ``[0, 1]`` to ``uint8`` RGBA.

    Channels are truncated (``int(c * 255)``); alpha is 255.
    """
    image = np.asarray(image, dtype=float)
    rgb = (np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)
    alpha = np.full(rgb.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=-1)
