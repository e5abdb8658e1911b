# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs the console loop and saves the
task list on the way out.
"""

from __future__ import annotations

import logging
import sqlite3

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort final save (no exceptions should escape)."""
    try:
        state.persist()
    except sqlite3.Error:
        logger.exception("Failed to save task list on shutdown.")


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
