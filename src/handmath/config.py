"""
config.py - Immutable brush, jitter and run configuration.

Brush and jitter presets are empirically tuned, symbol-specific constants.
They are not derived from caller input (the fraction rule brush size is the
one exception and is built per call from the rule thickness).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple


def linear_easing(t: float) -> float:
    return t


@dataclass(frozen=True)
class BrushConfig:
    """How the stroke engine interprets a weighted point sequence."""
    size: float = 8.0
    thinning: float = 0.3
    smoothing: float = 0.5
    streamline: float = 0.5
    easing: Optional[Callable[[float], float]] = None
    simulate_pressure: bool = True

    def as_options(self) -> Dict[str, Any]:
        """Keyword options for the stroke engine (easing omitted when unset)."""
        options: Dict[str, Any] = {
            "size": self.size,
            "thinning": self.thinning,
            "smoothing": self.smoothing,
            "streamline": self.streamline,
            "simulate_pressure": self.simulate_pressure,
        }
        if self.easing is not None:
            options["easing"] = self.easing
        return options


@dataclass(frozen=True)
class JitterProfile:
    """Sample density and perpendicular displacement magnitude of one primitive."""
    wobble: float = 2.0
    segments: int = 10

    def __post_init__(self):
        if self.wobble < 0:
            raise ValueError(f"wobble must be >= 0, got {self.wobble}")
        if not isinstance(self.segments, int) or isinstance(self.segments, bool):
            raise TypeError(f"segments must be int, not {type(self.segments).__name__}")
        if self.segments < 1:
            raise ValueError(f"segments must be >= 1, got {self.segments}")


# =============================================================================
# Glyph presets
# =============================================================================
SQRT_BRUSH = BrushConfig(size=8, thinning=0.3, smoothing=0.5, streamline=0.5,
                         easing=linear_easing, simulate_pressure=True)
BRACKET_BRUSH = BrushConfig(size=12, thinning=0.3, smoothing=0.5, streamline=0.4,
                            simulate_pressure=True)

SQRT_TICK_JITTER = JitterProfile(wobble=3, segments=5)
SQRT_DIAGONAL_JITTER = JitterProfile(wobble=4, segments=20)
SQRT_VINCULUM_JITTER = JitterProfile(wobble=3, segments=30)

FRACTION_WOBBLE = 5.0
FRACTION_MIN_SEGMENTS = 10
BRACKET_WOBBLE = 8.0
BRACKET_MIN_SEGMENTS = 15

# Caller units ("em-like") to stroke-engine coordinates
UNIT_SCALE = 1000


def fraction_brush(height: float) -> BrushConfig:
    return BrushConfig(size=height * 0.8, thinning=0.2, smoothing=0.6,
                       streamline=0.4, simulate_pressure=True)


# =============================================================================
# Command-line run configuration
# =============================================================================
@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration of a `handmath` CLI run."""
    logger_level: int = logging.INFO
    img_size: Tuple[int, int] = (1200, 400)
    dpi: int = 100
    output_dir: Path = field(default_factory=lambda: Path("./out"))
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        self.output_dir.mkdir(parents=True, exist_ok=True)
