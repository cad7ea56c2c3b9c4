"""Configuration loader for the sl train animation."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

from dotenv import load_dotenv
import yaml

DEFAULT_CONFIG_PATH = "config/config.yaml"


@dataclass(frozen=True)
class AnimationConfig:
    """Frame rate and climb ratio of the animation."""

    fps: int = 18
    flying_rate: int = 10


@dataclass(frozen=True)
class TrainsConfig:
    """Where custom trains are looked up when no directory is given."""

    directory: str | None = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_dir: str = "logs/"


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    animation: AnimationConfig = field(default_factory=AnimationConfig)
    trains: TrainsConfig = field(default_factory=TrainsConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def _positive_int(mapping: dict[str, Any], key: str, default: int, context: str) -> int:
    value = mapping.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"'{key}' in {context} config must be a positive integer, got {value!r}")
    return value


def default_config() -> AppConfig:
    """Configuration used when no config file is present."""
    return _apply_env(AppConfig())


def _apply_env(config: AppConfig) -> AppConfig:
    train_dir = os.environ.get("SL_TRAIN_DIR") or config.trains.directory
    log_level = os.environ.get("SL_LOG_LEVEL") or config.log.level
    return AppConfig(
        animation=config.animation,
        trains=TrainsConfig(directory=train_dir),
        log=LoggingConfig(level=log_level.upper(), log_dir=config.log.log_dir),
    )


def load_config(path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    animation_section = _section(data, "animation")
    trains_section = _section(data, "trains")
    logging_section = _section(data, "logging")

    defaults = AppConfig()
    animation = AnimationConfig(
        fps=_positive_int(animation_section, "fps", defaults.animation.fps, "animation"),
        flying_rate=_positive_int(
            animation_section, "flying_rate", defaults.animation.flying_rate, "animation"
        ),
    )

    directory = trains_section.get("directory")
    if directory is not None and not isinstance(directory, str):
        raise ValueError("'directory' in trains config must be a string")

    logging = LoggingConfig(
        level=str(logging_section.get("level", defaults.log.level)),
        log_dir=str(logging_section.get("log_dir", defaults.log.log_dir)),
    )

    return _apply_env(
        AppConfig(animation=animation, trains=TrainsConfig(directory=directory), log=logging)
    )


__all__ = [
    "AnimationConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "TrainsConfig",
    "default_config",
    "load_config",
]
