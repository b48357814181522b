"""Handwritten-style SVG path data for math typesetting glyphs.

Pipeline: glyph generator -> point sampler -> stroke outliner -> path data.

Convenience imports:
    from handmath import sqrt_handwritten, fraction_line_handwritten, bracket_handwritten
    from handmath import RNG, create_stroke_outliner
"""

from .config import BrushConfig, JitterProfile
from .glyphs import (
    GLYPHS,
    HandwrittenGlyphs,
    bracket_handwritten,
    fraction_line_handwritten,
    sqrt_handwritten,
)
from .outliner import StrokeOutliner, create_stroke_outliner, null_engine
from .path_data import to_path_data
from .rng import RNG, get_rng, set_global_seed
from .sampler import WeightedPoint, sample_line

__version__ = "0.1.0"

__all__ = [
    "BrushConfig",
    "JitterProfile",
    "GLYPHS",
    "HandwrittenGlyphs",
    "bracket_handwritten",
    "fraction_line_handwritten",
    "sqrt_handwritten",
    "StrokeOutliner",
    "create_stroke_outliner",
    "null_engine",
    "to_path_data",
    "RNG",
    "get_rng",
    "set_global_seed",
    "WeightedPoint",
    "sample_line",
]
