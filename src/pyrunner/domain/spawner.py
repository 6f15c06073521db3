from __future__ import annotations

from dataclasses import dataclass

from pyrunner.domain.game_state import Obstacle
from pyrunner.domain.rng import RandomSource
from pyrunner.domain.scoring import min_gap
from pyrunner.domain.sim_config import SimulationConfig


@dataclass(frozen=True)
class SpawnResult:
    obstacles: tuple[Obstacle, ...]
    spawn_timer: float


def spawn_obstacle(rng: RandomSource, config: SimulationConfig) -> Obstacle:
    # Width is drawn before height; seeded runs depend on this order.
    w = config.obstacle_min_w + rng.random() * config.obstacle_w_range
    h = config.obstacle_min_h + rng.random() * config.obstacle_h_range
    return Obstacle(
        x=config.field_width + config.spawn_offset,
        y=config.ground_y - h,
        w=w,
        h=h,
    )


def next_gap(score: float, rng: RandomSource, config: SimulationConfig) -> float:
    lo = min_gap(score, config)
    return lo + rng.random() * (config.max_gap - lo)


def tick_spawner(
    obstacles: tuple[Obstacle, ...],
    spawn_timer: float,
    score: float,
    rng: RandomSource,
    config: SimulationConfig,
) -> SpawnResult:
    spawn_timer -= 1
    if spawn_timer <= 0:
        obstacles = obstacles + (spawn_obstacle(rng, config),)
        spawn_timer = next_gap(score, rng, config)
    return SpawnResult(obstacles=obstacles, spawn_timer=spawn_timer)


def move_obstacles(
    obstacles: tuple[Obstacle, ...],
    speed: float,
    config: SimulationConfig,
) -> tuple[Obstacle, ...]:
    moved = (Obstacle(x=o.x - speed, y=o.y, w=o.w, h=o.h) for o in obstacles)
    # Keeps arrival order.
    return tuple(o for o in moved if o.x + o.w > -config.despawn_margin)
