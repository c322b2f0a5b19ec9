# src/kevin/cli/commands.py

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from ..core.ui import Ui
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


class Command(ABC):
    """One parsed user instruction. execute() returns the reply text."""

    @abstractmethod
    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str: ...

    @property
    def is_exit(self) -> bool:
        return False


class AddCommand(Command):
    def __init__(self, task: Task) -> None:
        self.task = task

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        tasks.add(self.task)
        storage.save(tasks)
        logger.debug("Added task %r", self.task)
        return ui.show_add_task(tasks, self.task)


class DeleteCommand(Command):
    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        removed = tasks.delete(self.index)
        storage.save(tasks)
        logger.debug("Deleted task %d: %r", self.index, removed)
        return ui.show_delete(tasks, removed)


class MarkCommand(Command):
    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        task = tasks.mark(self.index)
        storage.save(tasks)
        return ui.show_mark(task)


class UnmarkCommand(Command):
    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        task = tasks.unmark(self.index)
        storage.save(tasks)
        return ui.show_unmark(task)


class ListCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        return ui.show_list(tasks)


class FindCommand(Command):
    def __init__(self, keyword: str) -> None:
        self.keyword = keyword

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        return ui.show_find(self.keyword, tasks.find(self.keyword))


class HelpCommand(Command):
    def __init__(self, help_text: str) -> None:
        self.help_text = help_text

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        return self.help_text


class ExitCommand(Command):
    def execute(self, tasks: TaskList, ui: Ui, storage: TaskStore) -> str:
        return ui.show_exit()

    @property
    def is_exit(self) -> bool:
        return True


CommandFactory = Callable[[str], Command]


class CommandRegistry:
    """Keyword -> factory table used by the parser (todo, list, bye, ...)."""

    def __init__(self) -> None:
        self._factories: dict[str, CommandFactory] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        factory: CommandFactory,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._factories[key] = factory
        self._help[key] = help_text
        for alias in aliases:
            self._factories[alias.lower()] = factory

    def get(self, name: str) -> CommandFactory | None:
        return self._factories.get(name.lower())

    def build_help(self) -> str:
        lines = ["Here is what I understand:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)
