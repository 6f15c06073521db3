from __future__ import annotations

import logging

import pygame

from pyrunner.domain.events import Cue
from pyrunner.infra import audio
from pyrunner.infra.audio import CuePlayer, build_cue_player, load_cue_sounds
from pyrunner.infra.exceptions import AudioUnavailableError


class FakeSound:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.plays = 0
        self.stops = 0

    def play(self) -> None:
        if self.fail:
            raise pygame.error("device busy")
        self.plays += 1

    def stop(self) -> None:
        self.stops += 1


def test_cues_before_unlock_are_dropped():
    jump = FakeSound()
    player = CuePlayer({Cue.JUMP: jump})

    player.play(Cue.JUMP)
    player.unlock()
    player.play(Cue.JUMP)

    assert jump.plays == 1


def test_replay_restarts_the_sound():
    score = FakeSound()
    player = CuePlayer({Cue.SCORE: score})
    player.unlock()

    player.play_all((Cue.SCORE, Cue.SCORE))

    assert score.stops == 2
    assert score.plays == 2


def test_playback_failure_is_absorbed():
    player = CuePlayer({Cue.GAME_OVER: FakeSound(fail=True)})
    player.unlock()

    player.play(Cue.GAME_OVER)


def test_unknown_cue_is_ignored():
    player = CuePlayer({})
    player.unlock()

    player.play(Cue.JUMP)
    assert player.unlocked


def test_muted_player_has_no_sounds(tmp_path):
    player = build_cue_player(tmp_path, volume=0.25, mute=True)
    player.unlock()

    player.play(Cue.JUMP)


def test_mixer_failure_disables_audio(monkeypatch, tmp_path, caplog):
    def broken_mixer() -> None:
        raise AudioUnavailableError("no device")

    monkeypatch.setattr(audio, "init_mixer", broken_mixer)

    with caplog.at_level(logging.WARNING, logger="pyrunner"):
        player = build_cue_player(tmp_path, volume=0.25, mute=False)

    assert isinstance(player, CuePlayer)
    assert "audio disabled" in caplog.text
    player.unlock()
    player.play_all((Cue.JUMP, Cue.SCORE, Cue.GAME_OVER))


def test_missing_sound_files_are_skipped(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(audio, "init_mixer", lambda: None)

    with caplog.at_level(logging.WARNING, logger="pyrunner"):
        sounds = load_cue_sounds(tmp_path, volume=0.25)

    assert sounds == {}
    assert caplog.text.count("skipping missing sound") == 3
