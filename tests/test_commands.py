# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from kevin.cli.commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from kevin.core.errors import TaskIndexError
from kevin.tasks.task_models import Deadline, ToDo


def _file_lines(state) -> list[str]:
    return state.storage.path.read_text("utf-8").splitlines()


def test_add_saves_and_reports_count(state) -> None:
    reply = AddCommand(ToDo("read book")).execute(state.tasks, state.ui, state.storage)
    assert reply == "Got it. I've added this task:\n  [T][ ] read book\nNow you have 1 task in the list."
    assert _file_lines(state) == ["T | 0 | read book"]

    reply = AddCommand(Deadline("return book", date(2019, 12, 2))).execute(
        state.tasks, state.ui, state.storage
    )
    assert reply.endswith("Now you have 2 tasks in the list.")
    assert _file_lines(state)[1] == "D | 0 | return book | 2019-12-02"


def test_mark_unmark_delete_save_each_time(state) -> None:
    for name in ("a", "b"):
        AddCommand(ToDo(name)).execute(state.tasks, state.ui, state.storage)

    reply = MarkCommand(2).execute(state.tasks, state.ui, state.storage)
    assert reply == "Nice! I've marked this task as done:\n  [T][X] b"
    assert _file_lines(state) == ["T | 0 | a", "T | 1 | b"]

    reply = UnmarkCommand(2).execute(state.tasks, state.ui, state.storage)
    assert reply == "OK, I've marked this task as not done yet:\n  [T][ ] b"
    assert _file_lines(state) == ["T | 0 | a", "T | 0 | b"]

    reply = DeleteCommand(1).execute(state.tasks, state.ui, state.storage)
    assert reply == "Noted. I've removed this task:\n  [T][ ] a\nNow you have 1 task in the list."
    assert _file_lines(state) == ["T | 0 | b"]


def test_bad_index_does_not_touch_file(state) -> None:
    AddCommand(ToDo("a")).execute(state.tasks, state.ui, state.storage)
    before = _file_lines(state)
    with pytest.raises(TaskIndexError):
        DeleteCommand(5).execute(state.tasks, state.ui, state.storage)
    assert _file_lines(state) == before
    assert len(state.tasks) == 1


def test_list_and_find(state) -> None:
    assert ListCommand().execute(state.tasks, state.ui, state.storage) == "Your list is empty."

    for name in ("read book", "buy milk", "return book"):
        AddCommand(ToDo(name)).execute(state.tasks, state.ui, state.storage)

    assert ListCommand().execute(state.tasks, state.ui, state.storage) == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[T][ ] buy milk\n"
        "3.[T][ ] return book"
    )
    assert FindCommand("book").execute(state.tasks, state.ui, state.storage) == (
        "Here are the matching tasks in your list:\n"
        "1.[T][ ] read book\n"
        "3.[T][ ] return book"
    )
    assert (
        FindCommand("cake").execute(state.tasks, state.ui, state.storage)
        == 'No matching tasks found for "cake".'
    )


def test_exit(state) -> None:
    cmd = ExitCommand()
    assert cmd.is_exit
    assert cmd.execute(state.tasks, state.ui, state.storage) == "Bye. Hope to see you again soon!"
