"""Injected source of uniform random draws."""

import random
from typing import Optional, Protocol


class RandomDrawError(ValueError):
    """Raised when a random source returns a value outside [0, 1)."""


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """Seeded stdlib generator; ``random.Random`` already satisfies the protocol."""
    return random.Random(seed)


def draw(rng: RandomSource) -> float:
    """Take one draw and check it against the [0, 1) contract."""
    value = rng.random()
    if not 0.0 <= value < 1.0:
        raise RandomDrawError(f"random draw out of range: {value!r}")
    return value
