# src/kevin/core/errors.py

"""
User-facing error types.

Every error carries a message that can be shown to the user as-is.
They are raised where the problem is detected and caught once per turn
in core/chat.py (and once at startup for load failures).
"""

from __future__ import annotations

PREFIX = "OOPS!!! "


class KevinError(Exception):
    """Base class for errors that are reported to the user instead of crashing."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return PREFIX + str(self)


class CommandNotRecognizedError(KevinError):
    default_message = "I'm sorry, but I don't know what that means :-("


class CommandDetailError(KevinError):
    default_message = "That command is missing some details."


class TimeParsingError(KevinError):
    default_message = "Please enter the date in the format: yyyy-mm-dd"


class TaskIndexError(KevinError):
    default_message = "There is no task with that number."


class StorageError(KevinError):
    default_message = "There was an error loading the file."
