"""
rng.py
------

Seedable, thread-safe random source for the jitter routines.

- Explicit seeds give reproducible strokes (tests, snapshot comparison).
- Without a seed the generator is seeded from OS entropy.
- A lock guards every draw so one instance can be shared across threads.
"""

from __future__ import annotations

__all__ = ["RNG", "get_rng", "set_global_seed",]

import os
import random
import secrets
import threading
from typing import Optional


def _entropy_seed() -> int:
    return secrets.randbits(64)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe random generator.

    Attributes:
        _rng:  Backend `random.Random` instance.
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - `seed=0` is a valid seed; only `None` requests entropy seeding.
    """

    def __init__(self, seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._rng = random.Random(_entropy_seed() if seed is None else seed)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._rng.seed(_entropy_seed() if seed is None else seed)

    def random(self) -> float:
        """Uniform draw on [0, 1)."""
        with self._lock:
            return self._rng.random()

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self):
        with self._lock:
            return self._rng.getstate()

    def setstate(self, state) -> None:
        with self._lock:
            self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"<RNG pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL ACCESSORS
# =============================================================================
_global_rng = RNG()


def get_rng() -> RNG:
    """Return the shared RNG used when callers inject none."""
    return _global_rng


def set_global_seed(seed: Optional[int]) -> None:
    """Re-seed the shared RNG."""
    _global_rng.seed(seed)
