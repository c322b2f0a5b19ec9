# src/kevin/cli/parser.py

"""
Free-text command parser.

A line is split on its first whitespace run into a keyword and an argument
string; the keyword picks a factory from the registry, which validates the
arguments and builds the Command.
"""

from __future__ import annotations

import re

from ..core.errors import CommandDetailError, CommandNotRecognizedError
from ..tasks.task_models import Deadline, Event, ToDo
from ..tasks.time_utils import parse_date
from .commands import (
    AddCommand,
    Command,
    CommandRegistry,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)

BY_RE = re.compile(r"\s*/by(?:\s+|$)")
FROM_RE = re.compile(r"\s*/from(?:\s+|$)")
TO_RE = re.compile(r"\s*/to(?:\s+|$)")


def _split_once(args: str, pattern: re.Pattern[str]) -> tuple[str, str] | None:
    m = pattern.search(args)
    if not m:
        return None
    return args[: m.start()].strip(), args[m.end() :].strip()


def _description(command: str, text: str) -> str:
    text = text.strip()
    if not text:
        raise CommandDetailError(f"The description of a {command} cannot be empty.")
    if "|" in text:
        raise CommandDetailError(f"The description of a {command} cannot contain '|'.")
    if "\n" in text or "\r" in text:
        raise CommandDetailError(f"The description of a {command} must fit on one line.")
    return text


def _index(command: str, args: str) -> int:
    raw = args.strip()
    if not raw:
        raise CommandDetailError(f"Please tell me which task to {command}, e.g. '{command} 2'.")
    # int() alone would also take "+2", "1_0" and non-ASCII digits.
    if not (raw.isascii() and raw.isdigit()):
        raise CommandDetailError(f"'{raw}' is not a task number. Usage: {command} <task number>")
    return int(raw)


def parse_todo(args: str) -> Command:
    return AddCommand(ToDo(_description("todo", args)))


def parse_deadline(args: str) -> Command:
    split = _split_once(args, BY_RE)
    if split is None:
        raise CommandDetailError("A deadline needs a date. Usage: deadline <description> /by <yyyy-mm-dd>")
    desc, by = split
    name = _description("deadline", desc)
    if not by:
        raise CommandDetailError("The /by date of a deadline cannot be empty.")
    return AddCommand(Deadline(name, parse_date(by)))


def parse_event(args: str) -> Command:
    usage = "Usage: event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>"
    split = _split_once(args, FROM_RE)
    if split is None:
        raise CommandDetailError(f"An event needs a start date. {usage}")
    desc, times = split
    name = _description("event", desc)

    times_split = _split_once(times, TO_RE)
    if times_split is None:
        raise CommandDetailError(f"An event needs an end date. {usage}")
    start_raw, end_raw = times_split
    if not start_raw or not end_raw:
        raise CommandDetailError(f"The /from and /to dates of an event cannot be empty. {usage}")

    start = parse_date(start_raw)
    end = parse_date(end_raw)
    if end < start:
        raise CommandDetailError("An event cannot end before it starts.")
    return AddCommand(Event(name, start, end))


def parse_list(args: str) -> Command:
    return ListCommand()


def parse_mark(args: str) -> Command:
    return MarkCommand(_index("mark", args))


def parse_unmark(args: str) -> Command:
    return UnmarkCommand(_index("unmark", args))


def parse_delete(args: str) -> Command:
    return DeleteCommand(_index("delete", args))


def parse_find(args: str) -> Command:
    keyword = args.strip()
    if not keyword:
        raise CommandDetailError("Please tell me what to find, e.g. 'find book'.")
    return FindCommand(keyword)


def parse_exit(args: str) -> Command:
    return ExitCommand()


def parse_help(args: str) -> Command:
    return HelpCommand(registry.build_help())


registry = CommandRegistry()

registry.register("todo", parse_todo, help_text="todo <description>")
registry.register("deadline", parse_deadline, help_text="deadline <description> /by <yyyy-mm-dd>")
registry.register(
    "event",
    parse_event,
    help_text="event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>",
)
registry.register("list", parse_list, help_text="list")
registry.register("mark", parse_mark, help_text="mark <task number>")
registry.register("unmark", parse_unmark, help_text="unmark <task number>")
registry.register("delete", parse_delete, help_text="delete <task number>")
registry.register("find", parse_find, help_text="find <keyword>")
registry.register("help", parse_help, help_text="help")
registry.register("bye", parse_exit, help_text="bye (or exit)", aliases=["exit"])


class Parser:
    def __init__(self, commands: CommandRegistry | None = None) -> None:
        self._registry = commands or registry

    def parse(self, line: str) -> Command:
        parts = (line or "").strip().split(maxsplit=1)
        if not parts:
            raise CommandNotRecognizedError()

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        factory = self._registry.get(name)
        if factory is None:
            raise CommandNotRecognizedError()
        return factory(args)
