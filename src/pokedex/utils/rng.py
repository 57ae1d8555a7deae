import random
from typing import Optional, Protocol

from src.pokedex.constants import DAMAGE_ROLL_MAX, DAMAGE_ROLL_MIN


class RandomSource(Protocol):
    """The slice of random.Random the engine and lookups draw from.

    Injected everywhere randomness is needed so tests can script the draws.
    """

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def default_rng(seed: Optional[int] = None) -> random.Random:
    """Process-wide source; unseeded (non-deterministic) unless a seed is given."""
    return random.Random(seed)


def roll_percent(rng: RandomSource) -> float:
    """Uniform percentage draw in [0, 100)."""
    return rng.random() * 100


def damage_roll(rng: RandomSource) -> float:
    """Random damage factor in [0.85, 1.00]."""
    return rng.uniform(DAMAGE_ROLL_MIN, DAMAGE_ROLL_MAX)


def choice_index(rng: RandomSource, count: int) -> int:
    """Return a random index in range [0, count).

    Returns -1 when there is nothing to choose from.
    """
    if count <= 0:
        return -1
    return rng.randrange(count)
