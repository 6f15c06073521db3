from __future__ import annotations

import math

from pyrunner.domain.sim_config import SimulationConfig


def scroll_speed(score: float, config: SimulationConfig) -> int:
    # +1 px/tick every speed_step_score points.
    return config.base_speed + math.floor(score / config.speed_step_score)


def min_gap(score: float, config: SimulationConfig) -> int:
    # Obstacles get denser with score, never closer than floor_min_gap ticks.
    return max(config.floor_min_gap, config.start_min_gap - math.floor(score / config.gap_step_score))


def advance_score(score: float) -> float:
    return score + 1


def is_milestone(score: float, config: SimulationConfig) -> bool:
    return math.floor(score) % config.milestone_every == 0


def displayed(score: float) -> int:
    return math.floor(score)
