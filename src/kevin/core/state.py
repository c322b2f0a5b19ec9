# src/kevin/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..cli.parser import Parser
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .ui import Ui


@dataclass
class AppState:
    # Settings are kept on the state for easy access in connectors.
    settings: object

    tasks: TaskList
    storage: TaskStore
    ui: Ui
    parser: Parser = field(default_factory=Parser)
