# tests/test_task_models.py

from __future__ import annotations

from datetime import date

from kevin.tasks.task_models import Deadline, Event, Task, TaskKind, ToDo
from kevin.tasks.task_store import from_storage


def test_display_strings() -> None:
    assert str(ToDo("read book")) == "[T][ ] read book"
    assert str(ToDo("read book", is_done=True)) == "[T][X] read book"
    assert str(Deadline("return book", date(2019, 12, 2))) == "[D][ ] return book (by: Dec 2 2019)"
    assert (
        str(Event("meeting", date(2019, 10, 5), date(2019, 10, 6)))
        == "[E][ ] meeting (from: Oct 5 2019 to: Oct 6 2019)"
    )
    assert str(Task("generic")) == "[ ] generic"


def test_storage_lines() -> None:
    assert ToDo("read book", is_done=True).to_storage() == "T | 1 | read book"
    assert Deadline("return book", date(2019, 12, 2)).to_storage() == "D | 0 | return book | 2019-12-02"
    assert (
        Event("meeting", date(2019, 10, 5), date(2019, 10, 6)).to_storage()
        == "E | 0 | meeting | 2019-10-05--2019-10-06"
    )
    # A bare task is persisted as a todo.
    assert Task("generic").to_storage() == "T | 0 | generic"


def test_storage_line_parses_back_to_equal_task() -> None:
    for task in (
        ToDo("a", is_done=True),
        Deadline("b", date(2024, 2, 29)),
        Event("c", date(2024, 1, 1), date(2024, 1, 3), is_done=True),
    ):
        assert from_storage(task.to_storage()) == task


def test_mark_and_unmark_are_idempotent() -> None:
    t = ToDo("x")
    t.mark_done()
    t.mark_done()
    assert t.is_done
    assert t.status_icon == "X"
    t.mark_undone()
    t.mark_undone()
    assert not t.is_done
    assert t.status_icon == " "


def test_matches_is_case_sensitive_substring() -> None:
    t = ToDo("Read book")
    assert t.matches("book")
    assert t.matches("Read")
    assert not t.matches("read")


def test_kind_tags() -> None:
    assert ToDo.kind is TaskKind.TODO
    assert Deadline.kind is TaskKind.DEADLINE
    assert Event.kind is TaskKind.EVENT
    assert Task.kind is None


def test_generic_task_loads_back_as_todo() -> None:
    loaded = from_storage(Task("x", is_done=True).to_storage())
    assert loaded == ToDo("x", is_done=True)
    assert type(loaded) is ToDo


def test_unknown_tag_parses_to_none() -> None:
    assert from_storage("Z | 0 | mystery") is None
