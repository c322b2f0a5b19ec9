# src/kevin/core/ui.py

"""
Response formatting.

Ui only builds strings; the connectors decide where they go
(terminal lines or chat bubbles).
"""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from .errors import KevinError

DIVIDER_LENGTH = 50


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class Ui:
    def __init__(self, name: str = "Kevin") -> None:
        self.name = name

    def divider(self) -> str:
        return "-" * DIVIDER_LENGTH

    def show_welcome(self) -> str:
        return f"Hello! I'm {self.name}\nWhat can I do for you?"

    def show_exit(self) -> str:
        return "Bye. Hope to see you again soon!"

    def show_add_task(self, tasks: TaskList, task: Task) -> str:
        return (
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(tasks))} in the list."
        )

    def show_delete(self, tasks: TaskList, task: Task) -> str:
        return (
            "Noted. I've removed this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(tasks))} in the list."
        )

    def show_mark(self, task: Task) -> str:
        return f"Nice! I've marked this task as done:\n  {task}"

    def show_unmark(self, task: Task) -> str:
        return f"OK, I've marked this task as not done yet:\n  {task}"

    def show_list(self, tasks: TaskList) -> str:
        if not len(tasks):
            return "Your list is empty."
        lines = ["Here are the tasks in your list:"]
        lines.extend(f"{i}.{t}" for i, t in enumerate(tasks, start=1))
        return "\n".join(lines)

    def show_find(self, keyword: str, found: Iterable[tuple[int, Task]]) -> str:
        found = list(found)
        if not found:
            return f'No matching tasks found for "{keyword}".'
        lines = ["Here are the matching tasks in your list:"]
        lines.extend(f"{i}.{t}" for i, t in found)
        return "\n".join(lines)

    def show_error(self, error: KevinError) -> str:
        return error.user_message

    def show_internal_error(self) -> str:
        return "OOPS!!! Something went wrong on my side. Please try again."
