"""Cue playback on top of pygame.mixer.

The simulation only emits `Cue` values. `CuePlayer` maps them to loaded
sounds and drops every request until a user gesture has unlocked audio.
Nothing here may raise into the game loop: device and codec failures are
logged and the request is skipped.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from pyrunner.domain.events import Cue
from pyrunner.infra.exceptions import AudioUnavailableError
from pyrunner.logger import get_logger

log = get_logger("audio")

SFX_FILES = {
    Cue.JUMP: "jump.wav",
    Cue.SCORE: "score.wav",
    Cue.GAME_OVER: "gameover.wav",
}


class Playable(Protocol):
    def play(self) -> object: ...

    def stop(self) -> None: ...


class CuePlayer:
    def __init__(self, sounds: Mapping[Cue, Playable]) -> None:
        self._sounds = dict(sounds)
        self._unlocked = False

    @property
    def unlocked(self) -> bool:
        return self._unlocked

    def unlock(self) -> None:
        """Called on the first user gesture; later calls do nothing."""
        if self._unlocked:
            return
        self._unlocked = True
        log.debug("audio unlocked")

    def play(self, cue: Cue) -> None:
        # Requests before unlock are dropped, not queued.
        if not self._unlocked:
            return
        snd = self._sounds.get(cue)
        if snd is None:
            return
        try:
            # Restart from the top if the cue is still playing.
            snd.stop()
            snd.play()
        except pygame.error as e:
            log.debug("cue %s not played: %s", cue.value, e)

    def play_all(self, cues: tuple[Cue, ...]) -> None:
        for cue in cues:
            self.play(cue)


def init_mixer() -> None:
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
    except pygame.error as e:
        raise AudioUnavailableError(f"Mixer init failed: {e}") from e


def load_cue_sounds(sfx_dir: Path, *, volume: float) -> dict[Cue, pygame.mixer.Sound]:
    """Load every cue sound that exists under sfx_dir; missing files are skipped."""
    init_mixer()

    sounds: dict[Cue, pygame.mixer.Sound] = {}
    for cue, filename in SFX_FILES.items():
        path = sfx_dir / filename
        if not path.exists():
            log.warning("skipping missing sound for '%s': %s", cue.value, path)
            continue
        try:
            snd = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            log.warning("failed to load '%s' from %s: %s", cue.value, path, e)
            continue
        snd.set_volume(max(0.0, min(1.0, volume)))
        sounds[cue] = snd
    return sounds


def build_cue_player(sfx_dir: Path, *, volume: float, mute: bool) -> CuePlayer:
    if mute:
        return CuePlayer({})
    try:
        return CuePlayer(load_cue_sounds(sfx_dir, volume=volume))
    except AudioUnavailableError as e:
        log.warning("audio disabled: %s", e)
        return CuePlayer({})
