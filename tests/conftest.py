"""Pytest configuration: isolate preferences and saves per test."""

from pathlib import Path

import pytest

from zscreen.config import Preferences
from zscreen.screen.model import ScreenModel


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config and save directories at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("ZSCREEN_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("ZSCREEN_SAVE_DIR", str(tmp_path / "saves"))
    return config_dir


@pytest.fixture
def prefs(isolated_config: Path) -> Preferences:
    """Preferences backed by a file in the temporary config directory."""
    return Preferences(path=isolated_config / "prefs.json")


@pytest.fixture
def screen() -> ScreenModel:
    return ScreenModel(cols=80, rows=25)
