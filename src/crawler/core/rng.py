"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random that provides deterministic helpers.

    A single instance is created per run and threaded explicitly through
    dungeon generation and every turn, so two runs with the same seed draw
    the same sequence.
    """

    def __init__(self, seed: int | None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        return self._random.randrange(stop)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def coin_flip(self) -> bool:
        """Return True or False with equal probability."""
        return self._random.random() < 0.5

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)


def unseeded_rng() -> RNG:
    """Return an RNG seeded from system entropy."""
    return RNG(None)
