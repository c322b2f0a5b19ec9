# src/kevin/cli/main.py

"""
CLI entrypoint.

Parses flags, initializes logging, builds AppState (loading the task file),
then runs either the console REPL or the desktop chat window.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="kevin", description="Kevin: a small to-do list manager.")
    p.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help=f"Path to the tasks file (default: {settings.data_file})",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--gui", dest="ui_mode", action="store_const", const="gui", help="Open the desktop chat window")
    mode.add_argument(
        "--console", dest="ui_mode", action="store_const", const="console", help="Use the terminal (default)"
    )
    return p


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    changes: dict[str, object] = {}
    if args.file is not None:
        changes["data_file"] = args.file.expanduser()
    if args.ui_mode is not None:
        changes["ui_mode"] = args.ui_mode
    return dataclasses.replace(settings, **changes) if changes else settings


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    settings = apply_overrides(settings, args)

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (ui=%s, file=%s)...", settings.app_name, settings.ui_mode, settings.data_file)

    try:
        state = create_initial_state(settings=settings)
    except StorageError as e:
        logger.error("Could not load tasks: %s", e)
        print(e.user_message, file=sys.stderr)
        return 1

    if settings.ui_mode == "gui":
        from ..connectors.gui_connector import run_gui

        run_gui(state)
    else:
        run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
