"""Environment-driven settings for the driver catalog."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from drivercat.core.adapters.classpath import parse_classpath

CLASSPATH_ENV = "DRIVERCAT_CLASSPATH"
PREFERENCES_ENV = "DRIVERCAT_PREFERENCES"
LOG_LEVEL_ENV = "DRIVERCAT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING


def default_preferences_path() -> Path:
    """Return `$XDG_CONFIG_HOME/drivercat/userpreferences.json` (or under ~/.config)."""
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "drivercat" / "userpreferences.json"


@dataclass(frozen=True)
class Settings:
    """Resolved catalog settings."""

    classpath: tuple[Path, ...] = ()
    preferences_path: Path = field(default_factory=default_preferences_path)
    log_level: int = DEFAULT_LOG_LEVEL


def parse_log_level(raw: str | None) -> int:
    """Return a logging level from its name, falling back to WARNING."""
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Build settings from DRIVERCAT_* environment variables."""
    prefs = os.getenv(PREFERENCES_ENV)
    return Settings(
        classpath=tuple(parse_classpath(os.getenv(CLASSPATH_ENV))),
        preferences_path=Path(prefs).expanduser() if prefs else default_preferences_path(),
        log_level=parse_log_level(os.getenv(LOG_LEVEL_ENV)),
    )
