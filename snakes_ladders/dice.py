"""The die, and the single random generator shared by dice and layouts."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from snakes_ladders.errors import ConfigurationError

_DEFAULT_RNG = random.Random()


def default_rng() -> random.Random:
    """Process-wide generator, seeded once at import time."""
    return _DEFAULT_RNG


@dataclass
class Dice:
    faces: int = 6
    rng: random.Random = field(default_factory=default_rng, repr=False)

    def __post_init__(self):
        if self.faces < 1:
            raise ConfigurationError(f"Dice need at least one face, got {self.faces}.")

    def roll(self) -> int:
        return self.rng.randint(1, self.faces)
