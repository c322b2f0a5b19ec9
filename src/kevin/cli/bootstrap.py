# src/kevin/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires storage, the loaded task list and the Ui into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..core.ui import Ui
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises StorageError if the task file exists but cannot be read.
    """
    if settings is None:
        settings = get_settings()

    settings.data_file.parent.mkdir(parents=True, exist_ok=True)

    storage = TaskStore(settings.data_file)
    tasks = storage.load()

    return AppState(
        settings=settings,
        tasks=tasks,
        storage=storage,
        ui=Ui(name=getattr(settings, "app_name", "Kevin")),
    )
