"""Seeded Park-Miller random number generator.

Every procedural step draws from a single :class:`ParkMillerRNG` so that a
seed fully determines the output. The generator is a multiplicative linear
congruential generator with modulus ``2**31 - 1`` and multiplier ``16807``.
Python integers are exact, so the state update never overflows and the
sequence is identical on every platform.
"""
from __future__ import annotations

from typing import Callable

from .errors import SeedOutOfRangeError

MODULUS = 2_147_483_647
MULTIPLIER = 16_807

SEED_MIN = -(2**31)
SEED_MAX = 2**32 - 1

RandomSource = Callable[[], float]


def _validate_seed(seed: int, minimum: int = SEED_MIN, maximum: int = SEED_MAX) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError(f"Seed must be an integer, got {type(seed).__name__}")
    if not minimum <= seed <= maximum:
        raise SeedOutOfRangeError(seed, minimum, maximum)
    return seed


class ParkMillerRNG:
    """Callable returning the next float in the open interval (0, 1)."""

    __slots__ = ("_state", "_draws")

    def __init__(self, seed: int, *, seed_min: int = SEED_MIN, seed_max: int = SEED_MAX) -> None:
        seed = _validate_seed(seed, seed_min, seed_max)
        state = seed % MODULUS
        if state <= 0:
            # A zero state is a fixed point of the recurrence.
            state = MODULUS - 1
        self._state = state
        self._draws = 0

    @property
    def draws(self) -> int:
        """Number of values drawn so far."""
        return self._draws

    def __call__(self) -> float:
        self._state = (self._state * MULTIPLIER) % MODULUS
        self._draws += 1
        return self._state / MODULUS

    def __repr__(self) -> str:
        return f"ParkMillerRNG(draws={self._draws})"


def create_rng(seed: int, *, seed_min: int = SEED_MIN, seed_max: int = SEED_MAX) -> ParkMillerRNG:
    """Return a fresh generator for ``seed``, accepted only within ``[seed_min, seed_max]``."""
    return ParkMillerRNG(seed, seed_min=seed_min, seed_max=seed_max)


def rand_range(rng: RandomSource, minimum: float, maximum: float) -> float:
    """Scale one draw into the half-open interval ``[minimum, maximum)``."""
    return rng() * (maximum - minimum) + minimum


__all__ = [
    "MODULUS",
    "MULTIPLIER",
    "ParkMillerRNG",
    "RandomSource",
    "SEED_MAX",
    "SEED_MIN",
    "create_rng",
    "rand_range",
]
