# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from kevin.cli.bootstrap import create_initial_state
from kevin.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Kevin",
        log_level="WARNING",
        ui_mode="console",
        data_dir=tmp_path,
        data_file=tmp_path / "data" / "duke.txt",
        log_dir=tmp_path,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with a real TaskStore on a per-test file."""
    return create_initial_state(settings=settings)
