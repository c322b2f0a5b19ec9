# src/kevin/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.chat import handle_message, welcome
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def _print_block(state: AppState, text: str) -> None:
    divider = state.ui.divider()
    print(divider)
    print(text)
    print(divider)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (file=%s).", state.storage.path)
    _print_block(state, welcome(state))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        reply = handle_message(state, user_input)
        _print_block(state, reply.text)

        if reply.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
