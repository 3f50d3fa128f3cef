#!/usr/bin/env python3
"""
Random Sources for Name Generation
==================================
Every NameGenerator owns one of these instead of touching the process-wide
``random`` state, so concurrent generators never share a sequence and tests
can pin the output.

Both sources expose the two draws the generator needs:
- random()        float in [0.0, 1.0), used for probability gates
- randint(a, b)   integer N with a <= N <= b, used for uniform picks

TrueRandom draws from the OS entropy pool (secrets.SystemRandom) and cannot
be seeded. SeededRandom wraps random.Random for reproducible runs.
"""

import random
import secrets
from typing import Optional


class TrueRandom:
    """Cryptographically secure random source backed by os.urandom()."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)


class SeededRandom(TrueRandom):
    """Deterministic random source; same seed, same names."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)


def make_rng(seed: Optional[int] = None) -> TrueRandom:
    """Fresh random source for one generator: seeded if a seed is given."""
    if seed is not None:
        return SeededRandom(seed)
    return TrueRandom()


__all__ = [
    'TrueRandom',
    'SeededRandom',
    'make_rng',
]
