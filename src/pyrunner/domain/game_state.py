from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pyrunner.domain.sim_config import SimulationConfig


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    vy: float
    w: float
    h: float


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class AnimationState:
    run_frame: int = 0  # 0..run_cycle_len-1
    anim_tick: int = 0


@dataclass(frozen=True)
class GameState:
    phase: Phase
    player: Player
    obstacles: tuple[Obstacle, ...]
    score: float
    best: int
    spawn_timer: float
    animation: AnimationState

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING


def rest_player(config: SimulationConfig) -> Player:
    return Player(
        x=config.player_x,
        y=config.ground_y - config.player_h,
        vy=0.0,
        w=config.player_w,
        h=config.player_h,
    )


def new_game_state(config: SimulationConfig, *, best: int = 0) -> GameState:
    # best is a session high-water mark and survives resets.
    return GameState(
        phase=Phase.RUNNING,
        player=rest_player(config),
        obstacles=(),
        score=0.0,
        best=best,
        spawn_timer=0.0,
        animation=AnimationState(),
    )
