# src/taskpad/core/errors.py

"""User-facing errors raised by the command interpreter.

Every error carries a fixed message that is safe to show to the user as-is.
Callers (the command registry) recover them and keep the loop running.
"""

from __future__ import annotations


class TaskpadError(Exception):
    """Base exception for all command errors."""

    message = "Something went wrong with that command."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class MissingDetails(TaskpadError):
    """Raised when a command needs a suffix and none was given."""

    message = "OOPS!!! The description of a task cannot be empty."


class MissingByDeadline(TaskpadError):
    """Raised when a deadline command has no /by clause."""

    message = "OOPS!!! A deadline needs a /by clause, e.g. deadline return book /by 2/12/2021 1800"


class MissingAtEvent(TaskpadError):
    """Raised when an event command has no /at clause."""

    message = "OOPS!!! An event needs an /at clause, e.g. event project meeting /at Mon 2-4pm"


class UnknownDateTime(TaskpadError):
    """Raised when a date or date-time token does not match its pattern."""

    message = (
        "I don't recognise that date/time. "
        "Use d/M/yyyy for dates and d/M/yyyy HHmm for deadlines (e.g. 2/12/2021 1800)."
    )


class InvalidTaskNumber(TaskpadError):
    """Raised when mark/unmark/delete get a position that is not in the list."""

    def __init__(self, raw: str, size: int) -> None:
        self.raw = raw
        self.size = size
        if size == 0:
            text = "OOPS!!! There are no tasks in the list yet."
        else:
            text = f"OOPS!!! '{raw}' is not a task number. Pick one from 1 to {size}."
        super().__init__(text)
