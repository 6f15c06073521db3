from __future__ import annotations

import math
from dataclasses import dataclass, replace

from pyrunner.domain.animation import tick_animation
from pyrunner.domain.collision import first_collision
from pyrunner.domain.events import Cue
from pyrunner.domain.game_state import GameState, Phase, new_game_state
from pyrunner.domain.physics import apply_jump, integrate
from pyrunner.domain.rng import RandomSource
from pyrunner.domain.scoring import advance_score, is_milestone, scroll_speed
from pyrunner.domain.sim_config import SimulationConfig
from pyrunner.domain.spawner import move_obstacles, tick_spawner


@dataclass(frozen=True)
class StepResult:
    state: GameState
    cues: tuple[Cue, ...] = ()


class World:
    """
    Running/GameOver controller. Owns the random source, never the state:
    callers hold the current GameState and feed it back in.
    """

    def __init__(self, config: SimulationConfig, rng: RandomSource) -> None:
        self.config = config
        self._rng = rng

    def reset(self, *, best: int = 0) -> GameState:
        return new_game_state(self.config, best=best)

    def jump(self, state: GameState) -> StepResult:
        if state.phase is not Phase.RUNNING:
            return StepResult(state)

        cfg = self.config
        p = apply_jump(state.player, jump_impulse=cfg.jump_impulse, ground_y=cfg.ground_y)
        if p is None:
            return StepResult(state)
        return StepResult(replace(state, player=p), (Cue.JUMP,))

    def step(self, state: GameState) -> StepResult:
        if state.phase is not Phase.RUNNING:
            # Frozen until reset; the renderer keeps drawing this state.
            return StepResult(state)

        cfg = self.config
        cues: list[Cue] = []

        # Speed comes from the score as it was when the tick began.
        speed = scroll_speed(state.score, cfg)

        # ----- Physics -----
        player = integrate(state.player, gravity=cfg.gravity, ground_y=cfg.ground_y)

        # ----- Spawn + scroll -----
        spawned = tick_spawner(state.obstacles, state.spawn_timer, state.score, self._rng, cfg)
        obstacles = move_obstacles(spawned.obstacles, speed, cfg)

        # ----- Collision -----
        phase = state.phase
        best = state.best
        if first_collision(player, obstacles) is not None:
            phase = Phase.GAME_OVER
            best = max(best, math.floor(state.score))
            cues.append(Cue.GAME_OVER)

        # ----- Score -----
        score = state.score
        if phase is Phase.RUNNING:
            score = advance_score(score)
            if is_milestone(score, cfg):
                cues.append(Cue.SCORE)

        # ----- Animation -----
        animation = tick_animation(state.animation, phase, player, cfg)

        return StepResult(
            GameState(
                phase=phase,
                player=player,
                obstacles=obstacles,
                score=score,
                best=best,
                spawn_timer=spawned.spawn_timer,
                animation=animation,
            ),
            tuple(cues),
        )
