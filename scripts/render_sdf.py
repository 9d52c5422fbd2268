"""Render the shaded circle SDF and its gradient field to PNG.

Usage::

    python scripts/render_sdf.py                         # saves sdf_shaded.png
    python scripts/render_sdf.py --out shaded.png --field field.png
    python scripts/render_sdf.py --grid 100 75 --probe 400 100

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from sdfshade import (
    Circle2D,
    RenderConfig,
    ResolutionError,
    arrow_segments,
    probe_gradient,
    render_image,
    sample_grid,
)
from sdfshade.logging_config import setup_logging

logger = logging.getLogger("sdfshade.scripts.render_sdf")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def save_image(image, out_path: str) -> None:
    h, w = image.shape[:2]
    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)
    ax.imshow(image, interpolation="nearest")
    ax.set_axis_off()
    fig.subplots_adjust(0, 0, 1, 1)
    fig.savefig(out_path, dpi=100)
    plt.close(fig)
    logger.info("Saved: %s", out_path)


def save_vector_field(config: RenderConfig, field, out_path: str) -> None:
    sampling = sample_grid(field, config)
    segments = arrow_segments(sampling.samples, config.arrow_length).reshape(-1, 2, 2)

    w, h = config.render
    fig, ax = plt.subplots(figsize=(w / 50, h / 50), dpi=100)
    ax.add_collection(LineCollection(segments, colors="red", linewidths=1.0))
    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.set_aspect("equal")
    ax.set_title(
        f"Derivatives (dist range [{sampling.min_dist:.3f}, {sampling.max_dist:.3f}])"
    )
    fig.savefig(out_path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    logger.info("Saved: %s", out_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the shaded SDF and its gradient field.")
    parser.add_argument("--out", default="sdf_shaded.png", help="Shaded image output path")
    parser.add_argument("--field", default=None, help="Gradient field plot output path")
    parser.add_argument("--size", type=int, nargs=2, default=(800, 450), metavar=("W", "H"),
                        help="Render resolution (default 800 450)")
    parser.add_argument("--grid", type=int, nargs=2, default=(200, 225), metavar=("W", "H"),
                        help="Gradient grid resolution (default 200 225)")
    parser.add_argument("--radius", type=float, default=0.5, help="Circle radius (default 0.5)")
    parser.add_argument("--probe", type=int, nargs=2, default=None, metavar=("X", "Y"),
                        help="Print a finite-difference probe at raster pixel X Y")
    parser.add_argument("--log-level", default="INFO", help="Logging level name (default INFO)")
    args = parser.parse_args()

    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        config = RenderConfig(render=args.size, grid=args.grid, radius=args.radius)
    except ResolutionError as exc:
        parser.error(str(exc))
    field = Circle2D(config.radius)

    save_image(render_image(field, config), args.out)
    if args.field:
        save_vector_field(config, field, args.field)
    if args.probe:
        probe = probe_gradient(args.probe[0], args.probe[1], field, config)
        for line in probe.format_lines():
            print(line)


if __name__ == "__main__":
    main()
