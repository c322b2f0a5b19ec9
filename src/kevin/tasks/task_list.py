# src/kevin/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import TaskIndexError
from .task_models import Task


class TaskList:
    """
    Ordered in-memory task collection.

    Positions are 1-based everywhere in this class, matching what `list` shows.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _check(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            if not self._tasks:
                raise TaskIndexError(f"There is no task {index}: your list is empty.")
            raise TaskIndexError(
                f"There is no task {index}. Pick a number from 1 to {len(self._tasks)}."
            )
        return index - 1

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def delete(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Return (position, task) pairs whose name contains keyword."""
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if t.matches(keyword)]

    def to_storage(self) -> str:
        return "".join(f"{t.to_storage()}\n" for t in self._tasks)
