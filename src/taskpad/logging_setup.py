# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskpad.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Only taskpad records reach the console below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskpad" or record.name.startswith("taskpad."):
            return True
        # Everything else, captured warnings included.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpad",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Send logs to stderr and to <log_dir>/taskpad.log.

    Replies are printed to stdout by the console loop, so stderr stays at
    WARNING by default; the file keeps the DEBUG trail of parsed commands
    and saves. Re-running replaces the root handlers.
    """
    log_path = Path(log_dir) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_ConsoleNoiseFilter())

    logfile = logging.FileHandler(str(log_path), encoding="utf-8")
    logfile.setLevel(file_level)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for old in list(root.handlers):
        root.removeHandler(old)
    for handler in (console, logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.captureWarnings(True)
