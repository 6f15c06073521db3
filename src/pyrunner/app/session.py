from __future__ import annotations

from pyrunner.domain.events import Cue
from pyrunner.domain.game_state import GameState
from pyrunner.domain.scoring import displayed
from pyrunner.domain.world import StepResult, World
from pyrunner.infra.audio import CuePlayer
from pyrunner.logger import get_logger

log = get_logger("session")


class GameSession:
    """
    Holds the current GameState and applies commands to it as they arrive.
    Cues from every transition go straight to the audio player.
    """

    def __init__(self, world: World, audio: CuePlayer) -> None:
        self._world = world
        self._audio = audio
        self.state: GameState = world.reset()
        self.runs = 1

    def tick(self) -> None:
        self._apply(self._world.step(self.state))

    def jump(self) -> None:
        self._apply(self._world.jump(self.state))

    def reset(self) -> None:
        # Gated by the caller; resetting a live run simply starts over.
        self.state = self._world.reset(best=self.state.best)
        self.runs += 1
        log.info("run %d started (best=%d)", self.runs, self.state.best)

    def pointer(self) -> None:
        if self.state.running:
            self.jump()
        else:
            self.reset()

    def unlock_audio(self) -> None:
        self._audio.unlock()

    def _apply(self, result: StepResult) -> None:
        self.state = result.state
        if Cue.GAME_OVER in result.cues:
            log.info("game over: score=%d best=%d", displayed(self.state.score), self.state.best)
        self._audio.play_all(result.cues)
