# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from kevin.config import Settings

_VARS = ("KEVIN_APP_NAME", "KEVIN_LOG_LEVEL", "KEVIN_UI", "KEVIN_DATA_DIR", "KEVIN_DATA_FILE", "KEVIN_LOG_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Kevin"
    assert s.log_level == "WARNING"
    assert s.ui_mode == "console"
    assert s.data_file == Path("data") / "duke.txt"
    assert s.log_dir == Path("data")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("KEVIN_APP_NAME", "Duke")
    monkeypatch.setenv("KEVIN_LOG_LEVEL", "debug")
    monkeypatch.setenv("KEVIN_UI", "GUI")
    monkeypatch.setenv("KEVIN_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.app_name == "Duke"
    assert s.log_level == "DEBUG"
    assert s.ui_mode == "gui"
    assert s.data_file == tmp_path / "duke.txt"

    monkeypatch.setenv("KEVIN_DATA_FILE", str(tmp_path / "other.txt"))
    assert Settings.from_env().data_file == tmp_path / "other.txt"


def test_unknown_ui_mode_falls_back_to_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KEVIN_UI", "web")
    assert Settings.from_env().ui_mode == "console"
