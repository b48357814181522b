"""
-------
test_glyphs.py
-------
"""

import pytest

from handmath import config
from handmath.glyphs import (
    GLYPHS,
    VINCULUM_END_X,
    HandwrittenGlyphs,
    bracket_handwritten,
    bracket_points,
    bracket_segments,
    fraction_line_handwritten,
    fraction_segments,
    sqrt_handwritten,
    sqrt_primitives,
)
from handmath.path_data import count_commands
from handmath.rng import RNG


# A. Radical sign

def test_sqrt_three_independent_subpaths(seeded_rng, echo_outliner, recording_engine):
    d = sqrt_handwritten(0, 1000, rng=seeded_rng, outliner=echo_outliner)
    counts = count_commands(d)
    assert counts["M"] == 3
    assert counts["Z"] == 3
    # tick 5+1, diagonal 20+1, vinculum 30+1 samples
    assert counts["Q"] == 6 + 21 + 31
    assert [len(pts) for pts, _ in recording_engine.calls] == [6, 21, 31]


def test_sqrt_brush_and_construction(seeded_rng, echo_outliner, recording_engine):
    sqrt_handwritten(100, 1000, rng=seeded_rng, outliner=echo_outliner)
    _, options = recording_engine.calls[0]
    assert options["size"] == 8
    assert options["easing"](0.25) == 0.25

    tick, diagonal, vinculum = sqrt_primitives(100)
    assert (tick.x1, tick.y1, tick.x2, tick.y2) == (95, 722, 60, 760)
    assert (diagonal.x2, diagonal.y2) == (400, 140)
    assert (vinculum.x2, vinculum.y2) == (VINCULUM_END_X, 140)
    assert vinculum.profile == config.SQRT_VINCULUM_JITTER


def test_sqrt_vinculum_runs_to_oversized_end(seeded_rng, echo_outliner, recording_engine):
    sqrt_handwritten(0, 1000, rng=seeded_rng, outliner=echo_outliner)
    vinculum_points, _ = recording_engine.calls[2]
    assert vinculum_points[-1][0] == pytest.approx(400000)
    assert all(38.5 <= p[1] <= 41.5 for p in vinculum_points)


# B. Fraction rule

def test_fraction_view_box(seeded_rng, null_outliner):
    rule = fraction_line_handwritten(500, 0.04, rng=seeded_rng, outliner=null_outliner)
    assert rule["viewBox"] == "0 0 500000 40"
    assert rule["path"] == ""


def test_fraction_default_thickness(seeded_rng, null_outliner):
    rule = fraction_line_handwritten(2, rng=seeded_rng, outliner=null_outliner)
    assert rule["viewBox"] == "0 0 2000 40"


@pytest.mark.parametrize("width, segments", [(1, 10), (499, 10), (550, 11), (5000, 100)])
def test_fraction_segments(width, segments):
    assert fraction_segments(width) == segments


def test_fraction_samples_and_brush(seeded_rng, echo_outliner, recording_engine):
    rule = fraction_line_handwritten(3, 0.05, rng=seeded_rng, outliner=echo_outliner)
    points, options = recording_engine.calls[0]
    assert len(points) == 11
    assert points[0][0] == pytest.approx(0)
    assert points[-1][0] == pytest.approx(3000)
    assert all(25 - 2.5 <= p[1] <= 25 + 2.5 for p in points)
    assert options["size"] == pytest.approx(40)
    assert options["thinning"] == 0.2
    assert count_commands(rule["path"])["Q"] == 11


# C. Bracket

def test_bracket_corner_order_differs():
    left = bracket_points("left", 10, RNG(seed=1))
    right = bracket_points("right", 10, RNG(seed=1))
    assert [(p.x, p.y) for p in left[:2]] == [(50, 0), (20, 0)]
    assert [(p.x, p.y) for p in right[:2]] == [(20, 0), (50, 0)]
    assert [(p.x, p.y) for p in left[-2:]] == [(20, 10000), (50, 10000)]
    assert [(p.x, p.y) for p in right[-2:]] == [(50, 10000), (20, 10000)]


def test_bracket_interior_samples(seeded_rng):
    assert bracket_segments(10) == 200
    assert bracket_segments(0.1) == 15
    points = bracket_points("left", 10, seeded_rng)
    interior = points[2:-2]
    assert len(interior) == 200
    assert all(16 <= p.x <= 24 for p in interior)
    ys = [p.y for p in interior]
    assert ys == sorted(ys)
    assert 0 < ys[0] and ys[-1] < 10000
    assert all(p.pressure == 0.5 for p in points)


def test_bracket_small_height_uses_minimum(seeded_rng):
    assert len(bracket_points("right", 0.2, seeded_rng)) == 2 + 15 + 2


def test_bracket_invalid_type(seeded_rng):
    with pytest.raises(ValueError):
        bracket_handwritten("middle", 1, rng=seeded_rng)


def test_bracket_path(seeded_rng, echo_outliner, recording_engine):
    d = bracket_handwritten("left", 1, rng=seeded_rng, outliner=echo_outliner)
    assert count_commands(d) == {"M": 1, "Q": 24, "Z": 1}
    assert d.startswith("M 50 0 Q 50 0 35 0")
    _, options = recording_engine.calls[0]
    assert options["size"] == 12
    assert options["streamline"] == 0.4


# D. Engine absent / failing

@pytest.mark.parametrize("outliner_fixture", ["null_outliner", "failing_outliner"])
def test_generators_return_strings_without_engine(request, seeded_rng, outliner_fixture):
    outliner = request.getfixturevalue(outliner_fixture)
    assert sqrt_handwritten(0, 1000, rng=seeded_rng, outliner=outliner) == ""
    rule = fraction_line_handwritten(500, rng=seeded_rng, outliner=outliner)
    assert rule["path"] == "" and isinstance(rule["viewBox"], str)
    assert bracket_handwritten("left", 10, rng=seeded_rng, outliner=outliner) == ""
    assert bracket_handwritten("right", 10, rng=seeded_rng, outliner=outliner) == ""


def test_generators_with_default_outliner_return_strings():
    assert isinstance(sqrt_handwritten(0, 1000), str)
    assert isinstance(fraction_line_handwritten(1)["path"], str)
    assert isinstance(bracket_handwritten("left", 1), str)


# E. Bound generator set

def test_handwritten_glyphs_reseed_replays(echo_outliner):
    glyphs = HandwrittenGlyphs(rng=RNG(seed=9), outliner=echo_outliner)
    first = (glyphs.sqrt(0, 1000), glyphs.fraction_line(2), glyphs.bracket("right", 1))
    glyphs.reseed(9)
    second = (glyphs.sqrt(0, 1000), glyphs.fraction_line(2), glyphs.bracket("right", 1))
    assert first == second
    third = (glyphs.sqrt(0, 1000), glyphs.fraction_line(2), glyphs.bracket("right", 1))
    assert third != first


def test_glyph_registry():
    assert GLYPHS == {
        "sqrt": sqrt_handwritten,
        "fraction_line": fraction_line_handwritten,
        "bracket": bracket_handwritten,
    }
