from __future__ import annotations

from enum import Enum

from pyrunner.domain.game_state import AnimationState, Phase, Player
from pyrunner.domain.physics import is_grounded
from pyrunner.domain.sim_config import SimulationConfig

SHEET_COLS = 2
SHEET_ROWS = 3

# Sprite sheet frames used by the run cycle, indexed by AnimationState.run_frame.
RUN_FRAMES = (1, 2, 3)


class Pose(Enum):
    IDLE = "idle"
    RUN = "run"
    JUMP = "jump"
    FALL = "fall"


_STATIC_FRAMES = {
    Pose.IDLE: 0,
    Pose.JUMP: 4,
    Pose.FALL: 5,
}


def select_pose(phase: Phase, player: Player, ground_y: float) -> Pose:
    """
    Derive the pose from the current physics and game state only.
    The previous pose never matters.
    """
    if phase is not Phase.RUNNING:
        return Pose.IDLE
    if not is_grounded(player, ground_y):
        return Pose.JUMP if player.vy < 0 else Pose.FALL
    return Pose.RUN


def advance(anim: AnimationState, config: SimulationConfig) -> AnimationState:
    tick = anim.anim_tick + 1
    frame = anim.run_frame
    if tick >= config.anim_speed:
        tick = 0
        frame = (frame + 1) % config.run_cycle_len
    return AnimationState(run_frame=frame, anim_tick=tick)


def tick_animation(
    anim: AnimationState,
    phase: Phase,
    player: Player,
    config: SimulationConfig,
) -> AnimationState:
    # Counters only move while running on the ground; otherwise they are frozen.
    if select_pose(phase, player, config.ground_y) is Pose.RUN:
        return advance(anim, config)
    return anim


def frame_index(pose: Pose, anim: AnimationState) -> int:
    if pose is Pose.RUN:
        return RUN_FRAMES[anim.run_frame % len(RUN_FRAMES)]
    return _STATIC_FRAMES[pose]


def frame_size(sheet_w: int, sheet_h: int) -> tuple[int, int]:
    return sheet_w // SHEET_COLS, sheet_h // SHEET_ROWS


def source_rect(index: int, frame_w: int, frame_h: int) -> tuple[int, int, int, int]:
    """Crop rectangle (x, y, w, h) of a frame in the 2x3 sheet, row-major."""
    sx = (index % SHEET_COLS) * frame_w
    sy = (index // SHEET_COLS) * frame_h
    return sx, sy, frame_w, frame_h
