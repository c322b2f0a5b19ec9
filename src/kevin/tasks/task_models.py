# src/kevin/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

from .time_utils import format_for_display, format_for_storage

FIELD_SEPARATOR = " | "
EVENT_DATE_SEPARATOR = "--"


class TaskKind(StrEnum):
    """
    One-letter type tag used both in the display string and in the task file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """Generic task: a name plus a done flag."""

    kind: ClassVar[TaskKind | None] = None

    name: str
    is_done: bool = field(default=False, kw_only=True)

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def matches(self, keyword: str) -> bool:
        return keyword in self.name

    def _tag(self) -> str:
        return f"[{self.kind}]" if self.kind else ""

    def _details(self) -> str:
        return ""

    def _storage_fields(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return f"{self._tag()}[{self.status_icon}] {self.name}{self._details()}"

    def to_storage(self) -> str:
        # A bare Task has no tag of its own; it is persisted as a todo.
        kind = self.kind or TaskKind.TODO
        parts = [str(kind), "1" if self.is_done else "0", self.name, *self._storage_fields()]
        return FIELD_SEPARATOR.join(parts)


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind | None] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind | None] = TaskKind.DEADLINE

    by: date

    def _details(self) -> str:
        return f" (by: {format_for_display(self.by)})"

    def _storage_fields(self) -> list[str]:
        return [format_for_storage(self.by)]


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskKind | None] = TaskKind.EVENT

    start: date
    end: date

    def _details(self) -> str:
        return f" (from: {format_for_display(self.start)} to: {format_for_display(self.end)})"

    def _storage_fields(self) -> list[str]:
        return [
            f"{format_for_storage(self.start)}{EVENT_DATE_SEPARATOR}{format_for_storage(self.end)}"
        ]
