from __future__ import annotations

import pytest

from pyrunner.domain.sim_config import SimulationConfig
from pyrunner.domain.world import World


class SequenceRandom:
    """Hands out the given values in order, then repeats the last one."""

    def __init__(self, *values: float) -> None:
        self._values = list(values) or [0.0]
        self.calls = 0

    def random(self) -> float:
        i = min(self.calls, len(self._values) - 1)
        self.calls += 1
        return self._values[i]


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig()


@pytest.fixture
def rng() -> SequenceRandom:
    return SequenceRandom(0.5)


@pytest.fixture
def world(config: SimulationConfig, rng: SequenceRandom) -> World:
    return World(config, rng)
