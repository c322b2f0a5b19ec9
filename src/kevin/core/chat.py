# src/kevin/core/chat.py

"""
Core turn handling.

This module is transport-agnostic:
- connectors provide one line of user text,
- the core parses it, runs the command against the task list and storage,
- connectors decide how to display the reply (console lines, chat bubbles).

Key invariants:
- a KevinError never escapes a turn; it becomes an "OOPS!!!" reply,
- any other exception is logged with a traceback and reported as an internal error,
- mutating commands have already saved the file by the time the reply is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import KevinError
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    is_exit: bool = False
    is_error: bool = False


def welcome(state: AppState) -> str:
    return state.ui.show_welcome()


def handle_message(state: AppState, text: str) -> Reply:
    """Run one user turn and return the reply."""
    logger.debug("Handling input: %r", text)
    try:
        command = state.parser.parse(text)
        response = command.execute(state.tasks, state.ui, state.storage)
    except KevinError as e:
        logger.info("User error for %r: %s", text, e)
        return Reply(state.ui.show_error(e), is_error=True)
    except Exception:
        logger.exception("Command crashed for input %r", text)
        return Reply(state.ui.show_internal_error(), is_error=True)

    return Reply(response, is_exit=command.is_exit)
