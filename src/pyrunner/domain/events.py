from __future__ import annotations

from enum import Enum


class Cue(str, Enum):
    """Named side effects emitted by a tick, consumed by the audio adapter."""

    JUMP = "jump"
    SCORE = "score"
    GAME_OVER = "gameover"
