"""
sampler.py
----------

Point sampling of geometric primitives with hand-tremor jitter.

Primitives:
  - LineSegment: evenly spaced samples displaced along the segment normal
    by `(u - 0.5) * wobble`, u ~ U[0, 1).
  - Corner: two unjittered points emitted in the given order. The order
    encodes the side a stroke opens toward.

Every sample carries the same mid pressure (0.5). The random source is drawn
exactly once per emitted jittered sample.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_PRESSURE",
    "WeightedPoint",
    "LineSegment",
    "Corner",
    "unit_normal",
    "sample_line",
    "sample_corner",
    "sample_primitives",
]

import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from .config import JitterProfile
from .rng import RNG, get_rng

DEFAULT_PRESSURE = 0.5


class WeightedPoint(NamedTuple):
    x: float
    y: float
    pressure: float = DEFAULT_PRESSURE


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float
    profile: JitterProfile = JitterProfile()
    interior_only: bool = False


@dataclass(frozen=True)
class Corner:
    x_from: float
    y_from: float
    x_to: float
    y_to: float


Primitive = Union[LineSegment, Corner]


def unit_normal(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float]:
    """Left-hand unit normal of the segment; (0, 0) for a zero-length segment."""
    dx, dy = x2 - x1, y2 - y1
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    return -dy / length, dx / length


def sample_line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    profile: JitterProfile,
    rng: Optional[RNG] = None,
    *,
    interior_only: bool = False,
) -> List[WeightedPoint]:
    """
    Sample a segment at `t = i / segments`, `i = 0..segments`.

    Args:
        x1, y1, x2, y2: Segment endpoints.
        profile: Wobble magnitude and segment count.
        rng: Random source; the shared package RNG when None.
        interior_only: Drop both endpoints and emit only the
            `segments - 1` interior samples.

    Returns:
        list[WeightedPoint]: Jittered samples in parametric order.
    """
    rng = rng or get_rng()
    nx, ny = unit_normal(x1, y1, x2, y2)
    segments = profile.segments
    indices = range(1, segments) if interior_only else range(segments + 1)

    points: List[WeightedPoint] = []
    for i in indices:
        t = i / segments
        x = x1 + (x2 - x1) * t
        y = y1 + (y2 - y1) * t
        offset = (rng.random() - 0.5) * profile.wobble
        points.append(WeightedPoint(x + nx * offset, y + ny * offset, DEFAULT_PRESSURE))
    return points


def sample_corner(x_from: float, y_from: float, x_to: float, y_to: float) -> List[WeightedPoint]:
    return [
        WeightedPoint(float(x_from), float(y_from), DEFAULT_PRESSURE),
        WeightedPoint(float(x_to), float(y_to), DEFAULT_PRESSURE),
    ]


def sample_primitives(primitives: Iterable[Primitive],
                      rng: Optional[RNG] = None) -> List[WeightedPoint]:
    """Concatenate the samples of several primitives in order."""
    rng = rng or get_rng()
    points: List[WeightedPoint] = []
    for prim in primitives:
        if isinstance(prim, LineSegment):
            points.extend(sample_line(prim.x1, prim.y1, prim.x2, prim.y2, prim.profile,
                                      rng, interior_only=prim.interior_only))
        elif isinstance(prim, Corner):
            points.extend(sample_corner(prim.x_from, prim.y_from, prim.x_to, prim.y_to))
        else:
            raise TypeError(f"Unsupported primitive type: {type(prim).__name__}")
    return points
