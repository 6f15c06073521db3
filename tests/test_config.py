from __future__ import annotations

import os
from pathlib import Path

import pytest

from pyrunner.__main__ import _parse_args
from pyrunner.config import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    # No stray .env or PYRUNNER_* values from the developer's shell.
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("PYRUNNER_"):
            monkeypatch.delenv(key)


def test_defaults():
    cfg = load_config()

    assert (cfg.width, cfg.height, cfg.fps) == (900, 300, 60)
    assert cfg.seed is None
    assert cfg.assets_dir == Path("assets")
    assert cfg.volume == 0.25
    assert cfg.mute is False
    assert cfg.log_level == "info"
    assert cfg.simulation().ground_y == 240.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PYRUNNER_WIDTH", "1200")
    monkeypatch.setenv("PYRUNNER_SEED", "1234")
    monkeypatch.setenv("PYRUNNER_MUTE", "yes")
    monkeypatch.setenv("PYRUNNER_LOG_LEVEL", "DEBUG")

    cfg = load_config()

    assert cfg.width == 1200
    assert cfg.simulation().field_width == 1200.0
    assert cfg.seed == 1234
    assert cfg.mute is True
    assert cfg.log_level == "debug"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("PYRUNNER_FPS=30\n", encoding="utf-8")

    assert load_config().fps == 30


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("PYRUNNER_WIDTH", "wide"),
        ("PYRUNNER_HEIGHT", "50"),
        ("PYRUNNER_SEED", "abc"),
        ("PYRUNNER_VOLUME", "2"),
        ("PYRUNNER_MUTE", "maybe"),
        ("PYRUNNER_LOG_LEVEL", "loud"),
    ],
)
def test_bad_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError, match=name):
        load_config()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("PYRUNNER_LOG_LEVEL", "Warning")

    assert load_config().log_level == "warning"


def test_cli_log_level_choices():
    assert _parse_args(["--log-level", "DEBUG"]).log_level == "debug"

    with pytest.raises(SystemExit):
        _parse_args(["--log-level", "loud"])
