"""Configuration loading from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

from pyrunner.domain.sim_config import SimulationConfig

_PREFIX = "PYRUNNER_"

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class AppConfig:
    width: int
    height: int
    fps: int
    seed: int | None
    assets_dir: Path
    volume: float
    mute: bool
    log_level: str

    def simulation(self) -> SimulationConfig:
        return SimulationConfig(field_width=float(self.width), field_height=float(self.height))


def _read_env() -> dict[str, str | None]:
    # Real environment wins over .env; os.environ itself is left untouched.
    return {**dotenv_values(find_dotenv(usecwd=True)), **os.environ}


def _int(env: Mapping[str, str | None], name: str, default: int, *, minimum: int) -> int:
    raw = env.get(_PREFIX + name) or str(default)
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{_PREFIX}{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ConfigError(f"{_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _bool(env: Mapping[str, str | None], name: str, default: bool) -> bool:
    raw = env.get(_PREFIX + name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off", ""):
        return False
    raise ConfigError(f"{_PREFIX}{name} must be a boolean, got {raw!r}")


def load_config() -> AppConfig:
    """Load configuration from .env and environment variables."""
    env = _read_env()

    raw_seed = env.get(_PREFIX + "SEED")
    seed: int | None = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError as e:
            raise ConfigError(f"{_PREFIX}SEED must be an integer, got {raw_seed!r}") from e

    raw_volume = env.get(_PREFIX + "VOLUME") or "0.25"
    try:
        volume = float(raw_volume)
    except ValueError as e:
        raise ConfigError(f"{_PREFIX}VOLUME must be a number, got {raw_volume!r}") from e
    if not 0.0 <= volume <= 1.0:
        raise ConfigError(f"{_PREFIX}VOLUME must be within 0..1, got {volume}")

    raw_level = env.get(_PREFIX + "LOG_LEVEL") or "info"
    log_level = raw_level.strip().lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"{_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw_level!r}")

    # The ground sits 60px above the bottom, so anything shorter leaves no room to jump.
    return AppConfig(
        width=_int(env, "WIDTH", 900, minimum=200),
        height=_int(env, "HEIGHT", 300, minimum=200),
        fps=_int(env, "FPS", 60, minimum=1),
        seed=seed,
        assets_dir=Path(env.get(_PREFIX + "ASSETS_DIR") or "assets"),
        volume=volume,
        mute=_bool(env, "MUTE", False),
        log_level=log_level,
    )
