"""
-------
conftest.py
-------
Shared pytest fixtures for glyph pipeline tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt

from handmath.outliner import create_stroke_outliner, null_engine
from handmath.rng import RNG


# -----------------------------------------------------------------------------
# Fake stroke engines
# -----------------------------------------------------------------------------
class RecordingEngine:
    """Engine double: echoes the sample positions and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, points, **options):
        self.calls.append((points, options))
        return [(p[0], p[1]) for p in points]


class FailingEngine:
    def __call__(self, points, **options):
        raise RuntimeError("engine exploded")


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
    """
    Create and yield an isolated Matplotlib Figure/Axes pair.

    The figure is automatically closed after the test to avoid memory leaks.
    """
    fig, ax = plt.subplots(figsize=(4, 3))
    yield fig, ax
    plt.close(fig)


# -----------------------------------------------------------------------------
# Pipeline fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG with fixed seed."""
    return RNG(seed=123)


@pytest.fixture
def recording_engine():
    return RecordingEngine()


@pytest.fixture
def echo_outliner(recording_engine):
    """Outliner whose outline is the sampled point positions."""
    return create_stroke_outliner(recording_engine)


@pytest.fixture
def null_outliner():
    """Outliner with the stroke engine forced absent."""
    return create_stroke_outliner(null_engine)


@pytest.fixture
def failing_outliner():
    return create_stroke_outliner(FailingEngine())
