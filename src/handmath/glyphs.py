"""
glyphs.py
---------

Handwritten-style path data for math typesetting glyphs.

Each generator assembles sampled primitives with fixed construction
constants, outlines them with the stroke engine and serializes the outline
to SVG path data:

    sqrt_handwritten(extra_vinculum, view_box_height) -> str
    fraction_line_handwritten(width, thickness=0.04) -> {"path", "viewBox"}
    bracket_handwritten(type, height) -> str

Coordinates follow the internal stroke space, where one caller unit is
`UNIT_SCALE` (1000) engine units. The radical's vinculum deliberately runs far
past any real glyph width; clipping it to the box is the caller's job.
"""

from __future__ import annotations

__all__ = [
    "VINCULUM_END_X",
    "sqrt_primitives",
    "sqrt_handwritten",
    "fraction_segments",
    "fraction_line_handwritten",
    "bracket_segments",
    "bracket_points",
    "bracket_handwritten",
    "HandwrittenGlyphs",
    "GLYPHS",
]

import logging
import math
from typing import Dict, List, Optional

from . import config
from .config import BrushConfig, JitterProfile
from .outliner import StrokeOutliner, get_default_outliner
from .path_data import format_number, join_path_data, to_path_data
from .rng import RNG, get_rng
from .sampler import Corner, LineSegment, WeightedPoint, sample_line, sample_primitives

LOGGER_NAME = "handmath"

# Radical construction (engine units, offset vertically by the extra vinculum)
TICK_START = (95, 622)
TICK_END = (60, 660)
DIAGONAL_END = (400, 40)
VINCULUM_END_X = 400000

# Bracket construction (engine units)
BRACKET_STEM_X = 20
BRACKET_ARM_X = 50
BRACKET_TYPES = ("left", "right")


def _stroke(points: List[WeightedPoint], brush: BrushConfig,
            outliner: Optional[StrokeOutliner]) -> str:
    outliner = outliner or get_default_outliner()
    return to_path_data(outliner.outline(points, brush))


# =============================================================================
# Radical sign
# =============================================================================
def sqrt_primitives(extra_vinculum: float) -> List[LineSegment]:
    """Tick, rising diagonal and vinculum of the radical sign."""
    e = extra_vinculum
    return [
        LineSegment(TICK_START[0], TICK_START[1] + e, TICK_END[0], TICK_END[1] + e,
                    config.SQRT_TICK_JITTER),
        LineSegment(TICK_END[0], TICK_END[1] + e, DIAGONAL_END[0], DIAGONAL_END[1] + e,
                    config.SQRT_DIAGONAL_JITTER),
        LineSegment(DIAGONAL_END[0], DIAGONAL_END[1] + e, VINCULUM_END_X, DIAGONAL_END[1] + e,
                    config.SQRT_VINCULUM_JITTER),
    ]


def sqrt_handwritten(
    extra_vinculum: float,
    view_box_height: float,
    *,
    rng: Optional[RNG] = None,
    outliner: Optional[StrokeOutliner] = None,
) -> str:
    """
    Handwritten radical sign as three independent brush marks.

    Args:
        extra_vinculum: Extra vinculum thickness; shifts every stroke down.
        view_box_height: Height of the caller's view box. Only logged; the
            construction itself does not depend on it.
        rng: Random source for the jitter (shared package RNG when None).
        outliner: Stroke outliner (process default when None).

    Returns:
        str: Path data holding one closed sub-path per stroke.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"sqrt_handwritten(extra_vinculum={extra_vinculum}, view_box_height={view_box_height})")
    rng = rng or get_rng()
    paths = [
        _stroke(sample_primitives([seg], rng), config.SQRT_BRUSH, outliner)
        for seg in sqrt_primitives(extra_vinculum)
    ]
    return join_path_data(paths)


# =============================================================================
# Fraction rule
# =============================================================================
def fraction_segments(width: float) -> int:
    return max(config.FRACTION_MIN_SEGMENTS, math.floor(width / 50))


def fraction_line_handwritten(
    width: float,
    thickness: float = 0.04,
    *,
    rng: Optional[RNG] = None,
    outliner: Optional[StrokeOutliner] = None,
) -> Dict[str, str]:
    """Handwritten fraction rule and the view box it is drawn in."""
    rng = rng or get_rng()
    height = thickness * config.UNIT_SCALE
    length = width * config.UNIT_SCALE
    profile = JitterProfile(wobble=config.FRACTION_WOBBLE, segments=fraction_segments(width))

    # Horizontal segment: the normal is vertical, so jitter stays on the y axis
    points = sample_line(0, height / 2, length, height / 2, profile, rng)
    path = _stroke(points, config.fraction_brush(height), outliner)
    return {
        "path": path,
        "viewBox": f"0 0 {format_number(length)} {format_number(height)}",
    }


# =============================================================================
# Bracket
# =============================================================================
def bracket_segments(height: float) -> int:
    """Number of interior stem samples for a bracket of `height` caller units."""
    return max(config.BRACKET_MIN_SEGMENTS, math.floor(height * config.UNIT_SCALE / 50))


def bracket_points(type: str, height: float, rng: Optional[RNG] = None) -> List[WeightedPoint]:
    """
    Weighted samples of a square bracket: top corner, stem, bottom corner.

    The corner point order differs between "left" and "right" so that the
    corner strokes open toward the content side.

    Raises:
        ValueError: If `type` is not "left" or "right".
    """
    if type not in BRACKET_TYPES:
        raise ValueError(f"Invalid bracket type: {type!r}")

    rng = rng or get_rng()
    bottom = height * config.UNIT_SCALE
    stem, arm = BRACKET_STEM_X, BRACKET_ARM_X
    n = bracket_segments(height)
    # n samples strictly between the corners, at t = i / (n + 1)
    stem_run = LineSegment(stem, 0, stem, bottom,
                           JitterProfile(wobble=config.BRACKET_WOBBLE, segments=n + 1),
                           interior_only=True)
    if type == "left":
        primitives = [Corner(arm, 0, stem, 0), stem_run, Corner(stem, bottom, arm, bottom)]
    else:
        primitives = [Corner(stem, 0, arm, 0), stem_run, Corner(arm, bottom, stem, bottom)]
    return sample_primitives(primitives, rng)


def bracket_handwritten(
    type: str,
    height: float,
    *,
    rng: Optional[RNG] = None,
    outliner: Optional[StrokeOutliner] = None,
) -> str:
    points = bracket_points(type, height, rng)
    return _stroke(points, config.BRACKET_BRUSH, outliner)


# =============================================================================
# Bound generator set
# =============================================================================
class HandwrittenGlyphs:
    """
    Glyph generators bound to one random source and one outliner.

    Example:
        >>> glyphs = HandwrittenGlyphs(rng=RNG(seed=7))
        >>> d = glyphs.sqrt(0, 1000)
        >>> glyphs.reseed(7)
    """

    __slots__ = ("rng", "outliner")

    def __init__(self, rng: Optional[RNG] = None, outliner: Optional[StrokeOutliner] = None) -> None:
        self.rng = rng or RNG()
        self.outliner = outliner or get_default_outliner()

    def reseed(self, seed: Optional[int] = None) -> None:
        """Re-seed the bound RNG (for deterministic replay)."""
        self.rng.seed(seed)

    def sqrt(self, extra_vinculum: float, view_box_height: float) -> str:
        return sqrt_handwritten(extra_vinculum, view_box_height,
                                rng=self.rng, outliner=self.outliner)

    def fraction_line(self, width: float, thickness: float = 0.04) -> Dict[str, str]:
        return fraction_line_handwritten(width, thickness, rng=self.rng, outliner=self.outliner)

    def bracket(self, type: str, height: float) -> str:
        return bracket_handwritten(type, height, rng=self.rng, outliner=self.outliner)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} rng={self.rng!r} outliner={self.outliner!r}>"


GLYPHS = {
    "sqrt": sqrt_handwritten,
    "fraction_line": fraction_line_handwritten,
    "bracket": bracket_handwritten,
}
