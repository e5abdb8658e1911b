# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sqlite3

from ..cli.commands import registry as command_registry
from ..core.interpreter import EXIT_SIGNAL
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_reply(text: str) -> None:
    print(DIVIDER)
    print(text)
    print(DIVIDER)


def _save(state: AppState) -> None:
    try:
        state.persist()
    except sqlite3.Error:
        logger.exception("Failed to save task list.")
        _print_reply("Could not save your tasks. They are still here until you exit.")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (%d tasks loaded).", state.task_list.size())
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    _print_reply(f"Hello! I'm {app_name}.\nWhat can I do for you? Type help for commands.")

    while True:
        try:
            user_input = input("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling that command."

        if reply is None:
            continue

        if reply == EXIT_SIGNAL:
            break

        _print_reply(reply)

        if state.autosave:
            _save(state)

    _print_reply("Bye. Hope to see you again soon!")
    logger.info("Console connector finished.")
