# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import interpreter
from ..core.errors import TaskpadError
from ..core.state import AppState

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


def split_command(line: str) -> tuple[str, str]:
    """
    Split "word rest of line" into ("word", "rest of line").

    The word is lower-cased; the suffix is whatever follows the first space
    ("" if nothing does).
    """
    word, _, suffix = line.strip().partition(" ")
    return word.lower(), suffix


class CommandRegistry:
    """Command-word registry used by connectors (todo, list, bye, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._mutating: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        mutates: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        names = [key, *(a.lower() for a in aliases)]
        for n in names:
            self._handlers[n] = handler
            if mutates:
                self._mutating.add(n)

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "deadline return book /by 2/12/2021 1800".
        Returns the reply, or None for a blank line.
        """
        if not line.strip():
            return None

        name, suffix = split_command(line)

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Type help to list available commands."

        try:
            reply = handler(state, suffix)
        except TaskpadError as e:
            logger.debug("Command %s rejected: %s", name, type(e).__name__)
            return str(e)

        if name in self._mutating:
            state.dirty = True
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, suffix: str) -> str:
    return registry.build_help()


def cmd_todo(state: AppState, suffix: str) -> str:
    return interpreter.todo_command(state.task_list, suffix)


def cmd_deadline(state: AppState, suffix: str) -> str:
    return interpreter.deadline_command(state.task_list, suffix)


def cmd_event(state: AppState, suffix: str) -> str:
    return interpreter.event_command(state.task_list, suffix)


def cmd_list(state: AppState, suffix: str) -> str:
    return interpreter.list_command(state.task_list)


def cmd_find(state: AppState, suffix: str) -> str:
    return interpreter.find_command(state.task_list, suffix)


def cmd_calendar(state: AppState, suffix: str) -> str:
    return interpreter.calendar_command(state.task_list, suffix)


def cmd_mark(state: AppState, suffix: str) -> str:
    return interpreter.mark_command(state.task_list, suffix)


def cmd_unmark(state: AppState, suffix: str) -> str:
    return interpreter.unmark_command(state.task_list, suffix)


def cmd_delete(state: AppState, suffix: str) -> str:
    return interpreter.delete_command(state.task_list, suffix)


def cmd_bye(state: AppState, suffix: str) -> str:
    return interpreter.bye_command()


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["?"])
registry.register("todo", cmd_todo, help_text="Add a to-do: todo <description>", mutates=True)
registry.register(
    "deadline",
    cmd_deadline,
    help_text="Add a deadline: deadline <description> /by d/M/yyyy HHmm",
    mutates=True,
)
registry.register(
    "event", cmd_event, help_text="Add an event: event <description> /at <when>", mutates=True
)
registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("find", cmd_find, help_text="Find tasks by keyword (case-sensitive): find <keyword>")
registry.register("calendar", cmd_calendar, help_text="Deadlines on a date: calendar d/M/yyyy")
registry.register("mark", cmd_mark, help_text="Mark task as done: mark <number>", mutates=True)
registry.register("unmark", cmd_unmark, help_text="Mark task as not done: unmark <number>", mutates=True)
registry.register("delete", cmd_delete, help_text="Remove a task: delete <number>", mutates=True)
registry.register("bye", cmd_bye, help_text="Save and exit.", aliases=["exit", "quit"])
