"""
path_data.py
------------

Conversion of closed stroke outlines to SVG path data and back.

Serialization smooths the outline polygon with quadratic midpoint curves:

    M x0 y0  Q x0 y0 m01  Q x1 y1 m12  ...  Q xn yn mn0  Z

Every outline point is the control point of exactly one `Q` command whose end
point is the midpoint to the next point (cyclically). The result is a closed,
smoothed silhouette rather than a literal polyline.

Core API:

    to_path_data(outline) -> str
    join_path_data(parts) -> str
    parse_path_data(d) -> matplotlib.path.Path
    count_commands(d) -> collections.Counter
"""

from __future__ import annotations

__all__ = [
    "format_number",
    "to_path_data",
    "join_path_data",
    "parse_path_data",
    "count_commands",
]

import re
from collections import Counter
from typing import Iterable, List, Sequence

import numpy as np
from matplotlib.path import Path as mplPath

PRECISION = 3

_TOKEN_RE = re.compile(r"[A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def format_number(value: float, precision: int = PRECISION) -> str:
    """Compact decimal: rounded, trailing zeros trimmed, no negative zero."""
    value = round(float(value), precision) + 0.0
    return np.format_float_positional(value, precision=precision, trim="-")


def to_path_data(outline: Sequence[Sequence[float]]) -> str:
    """
    Closed quadratic-midpoint path data for an outline polygon ("" if empty).

    Coordinates are rounded to `PRECISION` (3) decimals, so the output is a
    lossy rendering of the outline.
    """
    n = len(outline)
    if n == 0:
        return ""

    fmt = format_number
    x0, y0 = outline[0][0], outline[0][1]
    tokens: List[str] = ["M", fmt(x0), fmt(y0)]
    for i in range(n):
        cx, cy = outline[i][0], outline[i][1]
        nx, ny = outline[(i + 1) % n][0], outline[(i + 1) % n][1]
        tokens += ["Q", fmt(cx), fmt(cy), fmt((cx + nx) / 2), fmt((cy + ny) / 2)]
    tokens.append("Z")
    return " ".join(tokens)


def join_path_data(parts: Iterable[str]) -> str:
    """Join independent sub-paths into one path-data string, skipping empty ones."""
    return " ".join(p for p in parts if p)


def count_commands(d: str) -> Counter:
    return Counter(tok for tok in _TOKEN_RE.findall(d) if tok.isalpha())


def parse_path_data(d: str) -> mplPath:
    """
    Convert M/Q/Z path data into a Matplotlib Path.

    Supports the absolute commands emitted by `to_path_data`, including
    implicit repetition of `Q` arguments and multiple sub-paths.

    Raises:
        ValueError: On unsupported commands or malformed argument lists.
    """
    tokens = _TOKEN_RE.findall(d)
    verts: List[tuple] = []
    codes: List[int] = []
    start = None
    cmd = None
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.isalpha():
            cmd = tok
            i += 1
            if cmd == "Z":
                if start is None:
                    raise ValueError("Close-path before any move-to")
                verts.append(start)
                codes.append(mplPath.CLOSEPOLY)
                continue
            if cmd not in ("M", "Q"):
                raise ValueError(f'Unsupported path command "{cmd}"')
            continue

        if cmd == "M":
            args = _take_numbers(tokens, i, 2)
            start = (args[0], args[1])
            verts.append(start)
            codes.append(mplPath.MOVETO)
            i += 2
        elif cmd == "Q":
            args = _take_numbers(tokens, i, 4)
            verts += [(args[0], args[1]), (args[2], args[3])]
            codes += [mplPath.CURVE3, mplPath.CURVE3]
            i += 4
        else:
            raise ValueError(f'Unexpected number "{tok}" after command {cmd!r}')

    if not verts:
        return mplPath(np.empty((0, 2)))
    return mplPath(np.asarray(verts, dtype=float), codes)


def _take_numbers(tokens: List[str], i: int, count: int) -> List[float]:
    args = tokens[i:i + count]
    if len(args) != count or any(t.isalpha() for t in args):
        raise ValueError(f"Expected {count} numbers at token {i}, got {args}")
    return [float(t) for t in args]
