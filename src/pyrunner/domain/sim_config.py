from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """
    Fixed numbers of the simulation. Units are pixels and ticks.
    Only the field size is meant to change between runs; the rest is the game.
    """
    field_width: float = 900.0
    field_height: float = 300.0
    ground_margin: float = 60.0     # ground line sits this far above the bottom

    # Player
    player_x: float = 80.0
    player_w: float = 48.0
    player_h: float = 48.0
    gravity: float = 0.9
    jump_impulse: float = -14.0

    # Obstacles
    obstacle_min_w: float = 20.0
    obstacle_w_range: float = 25.0
    obstacle_min_h: float = 30.0
    obstacle_h_range: float = 35.0
    spawn_offset: float = 10.0      # spawn just past the right edge
    despawn_margin: float = 20.0    # removed once fully this far past the left edge

    # Difficulty
    base_speed: int = 6
    speed_step_score: int = 400
    max_gap: float = 140.0
    start_min_gap: int = 90
    floor_min_gap: int = 35
    gap_step_score: int = 200

    # Score / animation
    milestone_every: int = 200
    anim_speed: int = 6             # ticks per run-cycle frame, smaller = faster
    run_cycle_len: int = 3

    @property
    def ground_y(self) -> float:
        return self.field_height - self.ground_margin
