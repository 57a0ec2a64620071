"""
Random draws shared by every simulation stage.

All draws go through an explicit ``random.Random`` so a seeded game is reproducible.
"""
from __future__ import annotations

import math
import random

NORMAL_CLAMP = 2.5
EXACT_BINOMIAL_MAX = 20


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def normal_random(rng: random.Random) -> float:
    """Standard normal draw clamped to +/-2.5 sigma."""
    return clamp(rng.gauss(0.0, 1.0), -NORMAL_CLAMP, NORMAL_CLAMP)


def binomial_roll(rng: random.Random, attempts: int, probability: float) -> int:
    """Number of makes out of *attempts* at *probability*.

    Exact Bernoulli trials up to 20 attempts, normal approximation above.
    Always returns a value in ``[0, attempts]``.
    """
    if attempts <= 0:
        return 0
    p = clamp(probability, 0.0, 1.0)
    if attempts <= EXACT_BINOMIAL_MAX:
        return sum(1 for _ in range(attempts) if rng.random() < p)
    mean = attempts * p
    stddev = math.sqrt(attempts * p * (1 - p))
    result = mean + normal_random(rng) * stddev
    return int(clamp(round(result), 0, attempts))
