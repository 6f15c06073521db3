from __future__ import annotations

from pyrunner.domain.game_state import Player


def is_grounded(player: Player, ground_y: float) -> bool:
    return player.y + player.h >= ground_y


def integrate(player: Player, *, gravity: float, ground_y: float) -> Player:
    # Vertical only: the player keeps its x and the obstacles scroll past it.
    vy = player.vy + gravity
    y = player.y + vy

    if y + player.h >= ground_y:
        y = ground_y - player.h
        vy = 0.0

    return Player(x=player.x, y=y, vy=vy, w=player.w, h=player.h)


def apply_jump(player: Player, *, jump_impulse: float, ground_y: float) -> Player | None:
    """Return the launched player, or None when airborne (a jump is a no-op)."""
    if not is_grounded(player, ground_y):
        return None
    return Player(x=player.x, y=player.y, vy=jump_impulse, w=player.w, h=player.h)
