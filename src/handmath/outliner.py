"""
outliner.py
-----------

Adapter around the external pressure-aware stroke-outlining engine.

The engine is any callable `engine(points, **options)` taking a list of
`[x, y, pressure]` samples plus the `BrushConfig.as_options()` keywords and
returning the closed outline polygon as a sequence of `(x, y)` pairs. The
default engine is `perfect_freehand.get_stroke`.

Resolution happens once, when an outliner is created. If the engine library
is missing, the null engine is substituted and every stroke degrades to an
empty outline instead of failing the caller. Faults raised by the engine
during a call are logged and surface as an empty outline as well.
"""

from __future__ import annotations

__all__ = [
    "StrokeEngine",
    "StrokeOutline",
    "null_engine",
    "resolve_engine",
    "StrokeOutliner",
    "create_stroke_outliner",
    "get_default_outliner",
]

import importlib
import logging
import threading
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .config import BrushConfig
from .sampler import WeightedPoint

LOGGER_NAME = "handmath"
ENGINE_MODULE = "perfect_freehand"
ENGINE_FUNCTION = "get_stroke"

StrokeEngine = Callable[..., Sequence[Sequence[float]]]
StrokeOutline = List[Tuple[float, float]]


def null_engine(points: Sequence[Sequence[float]], **options: Any) -> StrokeOutline:
    """Engine stand-in used when no outlining library is available."""
    return []


def resolve_engine() -> StrokeEngine:
    """Locate the stroke-outlining engine, or the null engine if unavailable."""
    logger = logging.getLogger(LOGGER_NAME)
    try:
        module = importlib.import_module(ENGINE_MODULE)
    except ImportError:
        logger.warning(f"{ENGINE_MODULE} is not installed; handwritten strokes will be empty.")
        return null_engine

    engine = getattr(module, ENGINE_FUNCTION, None)
    if not callable(engine):
        logger.warning(f"{ENGINE_MODULE}.{ENGINE_FUNCTION} not found; handwritten strokes will be empty.")
        return null_engine
    logger.debug(f"Resolved stroke engine {ENGINE_MODULE}.{ENGINE_FUNCTION}")
    return engine


class StrokeOutliner:
    """
    Fail-open wrapper turning weighted samples into a stroke outline.

    Attributes:
        engine: The resolved outlining callable.
    """

    __slots__ = ("engine",)

    def __init__(self, engine: StrokeEngine) -> None:
        if not callable(engine):
            raise TypeError(f"engine must be callable, not {type(engine).__name__}")
        self.engine = engine

    def outline(self, points: Sequence[WeightedPoint], brush: BrushConfig) -> StrokeOutline:
        """Outline `points` with `brush`; never raises."""
        logger = logging.getLogger(LOGGER_NAME)
        try:
            samples = [[float(p[0]), float(p[1]), float(p[2])] for p in points]
            raw = self.engine(samples, **brush.as_options())
            return [(float(pt[0]), float(pt[1])) for pt in (raw if raw is not None else ())]
        except Exception:
            logger.warning(f"Stroke outlining failed on {len(points)} points; using empty outline.",
                           exc_info=True)
            return []

    __call__ = outline

    @property
    def is_null(self) -> bool:
        return self.engine is null_engine

    def __repr__(self) -> str:
        name = getattr(self.engine, "__qualname__", type(self.engine).__name__)
        return f"<StrokeOutliner engine={name}>"


def create_stroke_outliner(engine: Optional[StrokeEngine] = None) -> StrokeOutliner:
    """Build an outliner around `engine`, resolving the default engine when None."""
    return StrokeOutliner(engine if engine is not None else resolve_engine())


_default_outliner: Optional[StrokeOutliner] = None
_default_lock = threading.Lock()


def get_default_outliner() -> StrokeOutliner:
    """Return the process-wide outliner (engine resolved on first use only)."""
    global _default_outliner
    with _default_lock:
        if _default_outliner is None:
            _default_outliner = create_stroke_outliner()
        return _default_outliner
