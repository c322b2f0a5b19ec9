# src/kevin/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import StorageError, TimeParsingError
from .task_list import TaskList
from .task_models import (
    EVENT_DATE_SEPARATOR,
    FIELD_SEPARATOR,
    Deadline,
    Event,
    Task,
    TaskKind,
    ToDo,
)
from .time_utils import parse_date

logger = logging.getLogger(__name__)

# Fields per line, by kind: tag | done | name [| dates]
_FIELD_COUNTS = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 4,
}


def from_storage(line: str) -> Task | None:
    """
    Parse one storage line back into a task (inverse of Task.to_storage).

    A generic Task is stored with the todo tag, so it comes back as a ToDo.
    Returns None for lines with an unknown type tag.
    Raises ValueError / TimeParsingError for malformed known lines.
    """
    parts = line.split(FIELD_SEPARATOR)
    try:
        kind = TaskKind(parts[0].strip())
    except ValueError:
        return None

    expected = _FIELD_COUNTS[kind]
    if len(parts) != expected:
        raise ValueError(f"expected {expected} fields for {kind.name.lower()}, got {len(parts)}")

    done_flag = parts[1].strip()
    if done_flag not in ("0", "1"):
        raise ValueError(f"done flag must be 0 or 1, got {done_flag!r}")
    is_done = done_flag == "1"
    name = parts[2]

    if kind is TaskKind.TODO:
        return ToDo(name, is_done=is_done)
    if kind is TaskKind.DEADLINE:
        return Deadline(name, parse_date(parts[3]), is_done=is_done)

    dates = parts[3].split(EVENT_DATE_SEPARATOR)
    if len(dates) != 2:
        raise ValueError(f"event dates must look like start{EVENT_DATE_SEPARATOR}end")
    return Event(name, parse_date(dates[0]), parse_date(dates[1]), is_done=is_done)


class TaskStore:
    """
    Flat-file task storage.

    One task per line, fields separated by " | ":
        T | 1 | read book
        D | 0 | return book | 2019-12-02
        E | 0 | project meeting | 2019-12-02--2019-12-03

    The whole file is rewritten on every save.
    """

    def __init__(self, path: str | Path = "data/duke.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        tasks = TaskList()
        if not self._path.exists():
            logger.info("Task file %s not found; starting with an empty list.", self._path)
            return tasks

        try:
            # newline="" keeps \r and other separators inside names untouched.
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to read task file %s", self._path)
            raise StorageError(f"There was an error loading the file {self._path}.") from e

        # Only "\n" ends a record; str.splitlines() would also break on U+2028, \x85, ...
        for lineno, raw in enumerate(text.split("\n"), start=1):
            raw = raw.removesuffix("\r")
            if not raw.strip():
                continue
            try:
                task = from_storage(raw)
            except (ValueError, TimeParsingError) as e:
                logger.error("Corrupt line %d in %s: %r (%s)", lineno, self._path, raw, e)
                raise StorageError(
                    f"There was an error loading the file {self._path} (line {lineno}: {e})."
                ) from e
            if task is None:
                logger.warning("Skipping line %d with unknown type in %s: %r", lineno, self._path, raw)
                continue
            tasks.add(task)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(tasks.to_storage(), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise StorageError(f"There was an error saving to the file {self._path}.") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
