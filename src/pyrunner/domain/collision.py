from __future__ import annotations

from typing import Union

from pyrunner.domain.game_state import Obstacle, Player

Rect = Union[Player, Obstacle]


def rects_overlap(a: Rect, b: Rect) -> bool:
    # Strict on every side: rectangles that only touch do not collide.
    return (
        a.x < b.x + b.w
        and a.x + a.w > b.x
        and a.y < b.y + b.h
        and a.y + a.h > b.y
    )


def first_collision(player: Player, obstacles: tuple[Obstacle, ...]) -> Obstacle | None:
    for o in obstacles:
        if rects_overlap(player, o):
            return o
    return None
