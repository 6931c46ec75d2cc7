import logging
import os
from pathlib import Path

import pytest

from drivercat.core.settings import (
    CLASSPATH_ENV,
    LOG_LEVEL_ENV,
    PREFERENCES_ENV,
    default_preferences_path,
    load_settings,
    parse_log_level,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (CLASSPATH_ENV, PREFERENCES_ENV, LOG_LEVEL_ENV, "XDG_CONFIG_HOME"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.classpath == ()
    assert settings.preferences_path == Path.home() / ".config" / "drivercat" / "userpreferences.json"
    assert settings.log_level == logging.WARNING


def test_default_preferences_path_honors_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_preferences_path() == tmp_path / "drivercat" / "userpreferences.json"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv(CLASSPATH_ENV, os.pathsep.join([str(tmp_path / "a.jar"), str(tmp_path)]))
    monkeypatch.setenv(PREFERENCES_ENV, str(tmp_path / "prefs.json"))
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    settings = load_settings()

    assert settings.classpath == (tmp_path / "a.jar", tmp_path)
    assert settings.preferences_path == tmp_path / "prefs.json"
    assert settings.log_level == logging.DEBUG


@pytest.mark.parametrize("raw", [None, "", "chatty"])
def test_parse_log_level_falls_back_to_warning(raw):
    assert parse_log_level(raw) == logging.WARNING
