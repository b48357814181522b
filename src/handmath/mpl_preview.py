"""
mpl_preview.py
--------------

Matplotlib rendering of handwritten glyph path data.

Path data is parsed into a `matplotlib.path.Path` and wrapped in a filled
`PathPatch`. Stroke-engine coordinates grow downward (SVG convention), so
preview axes are y-inverted.
"""

from __future__ import annotations

__all__ = ["path_patch", "draw_path_data", "render_glyph_sheet"]

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import PathPatch

from .path_data import parse_path_data

PathLike = Union[str, os.PathLike]
LOGGER_NAME = "handmath"
DEFAULT_STYLE = {"facecolor": "black", "edgecolor": "none", "linewidth": 0}


def path_patch(d: str, **style: Any) -> PathPatch:
    """Filled patch for a path-data string."""
    return PathPatch(parse_path_data(d), **{**DEFAULT_STYLE, **style})


def draw_path_data(ax: Axes, d: str, **style: Any) -> Optional[PathPatch]:
    """
    Add path data to `ax` and fit the view to it.

    Returns:
        PathPatch | None: The added patch, or None for empty path data.
    """
    if not isinstance(ax, Axes):
        raise TypeError(f"ax must be a Matplotlib Axes, not {type(ax).__name__}")
    if not d:
        return None

    patch = path_patch(d, **style)
    ax.add_patch(patch)
    extents = patch.get_path().get_extents()
    pad_x = max(extents.width * 0.05, 1.0)
    pad_y = max(extents.height * 0.05, 1.0)
    ax.set_xlim(extents.x0 - pad_x, extents.x1 + pad_x)
    ax.set_ylim(extents.y1 + pad_y, extents.y0 - pad_y)
    return patch


def render_glyph_sheet(glyphs: Dict[str, str],
                       out_path: PathLike,
                       img_size: Tuple[int, int] = (1200, 400),
                       dpi: int = 100) -> Path:
    """Draw each named path-data string in its own panel and save the figure."""
    logger = logging.getLogger(LOGGER_NAME)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    count = max(1, len(glyphs))
    fig, axes = plt.subplots(1, count, figsize=(img_size[0] / dpi, img_size[1] / dpi),
                             squeeze=False)
    try:
        for ax, (name, d) in zip(axes[0], glyphs.items()):
            ax.set_title(name)
            ax.axis("off")
            if draw_path_data(ax, d) is None:
                logger.warning(f"Glyph '{name}' has empty path data; panel left blank.")
        fig.savefig(out_path, dpi=dpi)
    finally:
        plt.close(fig)

    logger.info(f"Glyph sheet written: {out_path}")
    return out_path
