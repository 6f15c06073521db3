from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def make_rng(seed: int | None = None) -> RandomSource:
    # None seeds from the OS, any int gives a reproducible run.
    return random.Random(seed)
