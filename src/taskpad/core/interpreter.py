# src/taskpad/core/interpreter.py

"""
Command interpreter.

One function per command kind. Each takes the shared TaskList and the raw
command suffix (text after the command word, "" if nothing follows), mutates or
queries the list, and returns the response text. Failures are raised as
TaskpadError subclasses and never leave a half-added task behind.
"""

from __future__ import annotations

import logging

from ..tasks.dates import FallbackRaw, Normalized, deadline_date, normalize_deadline, parse_query_date
from ..tasks.task_models import Task, TaskKind, TaskList
from .errors import InvalidTaskNumber, MissingAtEvent, MissingByDeadline, MissingDetails, TaskpadError

logger = logging.getLogger(__name__)

EXIT_SIGNAL = "BYE"

BY_SEPARATOR = " /by "
AT_SEPARATOR = " /at "


def _added_reply(task: Task, task_list: TaskList) -> str:
    return (
        "Got it. I've added this task:\n"
        f"\t{task.display()}\n"
        f"Now you have {task_list.size()} task(s) in the list."
    )


def _report(header: str, tasks: list[Task]) -> str:
    return "\n".join([header, *(t.display() for t in tasks)])


def _split_clause(
    suffix: str | None, separator: str, missing: type[TaskpadError]
) -> tuple[str, str]:
    """Split "<description><separator><clause>" into its two halves."""
    if not suffix or not suffix.strip():
        raise MissingDetails()

    parts = suffix.split(separator)
    description = parts[0]
    if not description.strip():
        raise MissingDetails()

    if len(parts) < 2 or not parts[1].strip():
        raise missing()

    return description, parts[1]


def _position(task_list: TaskList, suffix: str | None) -> int:
    if not suffix or not suffix.strip():
        raise MissingDetails()
    raw = suffix.strip()
    try:
        position = int(raw)
    except ValueError:
        raise InvalidTaskNumber(raw, task_list.size()) from None
    if position < 1 or position > task_list.size():
        raise InvalidTaskNumber(raw, task_list.size())
    return position


def todo_command(task_list: TaskList, suffix: str | None) -> str:
    if not suffix or not suffix.strip():
        raise MissingDetails()

    task = Task.todo(task_list.next_index(), suffix)
    task_list.add(task)
    logger.debug("Todo added index=%s", task.index)
    return _added_reply(task, task_list)


def deadline_command(task_list: TaskList, suffix: str | None) -> str:
    description, raw_by = _split_clause(suffix, BY_SEPARATOR, MissingByDeadline)

    outcome = normalize_deadline(raw_by)
    match outcome:
        case Normalized(text=by):
            postscript = None
        case FallbackRaw(text=by, warning=warning):
            postscript = warning

    task = Task.deadline(task_list.next_index(), description, by)
    task_list.add(task)
    logger.debug("Deadline added index=%s normalized=%s", task.index, postscript is None)

    reply = _added_reply(task, task_list)
    if postscript is not None:
        reply += f"\nPS: {postscript}"
    return reply


def event_command(task_list: TaskList, suffix: str | None) -> str:
    description, at = _split_clause(suffix, AT_SEPARATOR, MissingAtEvent)

    task = Task.event(task_list.next_index(), description, at)
    task_list.add(task)
    logger.debug("Event added index=%s", task.index)
    return _added_reply(task, task_list)


def list_command(task_list: TaskList) -> str:
    if task_list.size() == 0:
        return "List is empty."
    return _report("Here are the task(s) in your list:", task_list.tasks)


def find_command(task_list: TaskList, suffix: str | None) -> str:
    matches: list[Task] = []
    if suffix:
        matches = [t for t in task_list if suffix in t.description]

    if not matches:
        return "No matching tasks with that keyword found."
    return _report("Here are the matching task(s) in your list:", matches)


def calendar_command(task_list: TaskList, suffix: str | None) -> str:
    wanted = parse_query_date(suffix)

    matches: list[Task] = []
    for task in task_list:
        if task.kind is not TaskKind.DEADLINE:
            continue
        task_date = deadline_date(task.by)
        if task_date is None:
            # Raw (un-normalized) deadline text has no date to compare.
            logger.debug("Calendar skips raw deadline index=%s", task.index)
            continue
        if task_date == wanted:
            matches.append(task)

    if not matches:
        return "No matching deadlines found."
    return _report("Here are the task(s) in your list on that date:", matches)


def bye_command() -> str:
    return EXIT_SIGNAL


def mark_command(task_list: TaskList, suffix: str | None) -> str:
    task = task_list.get(_position(task_list, suffix))
    task.done = True
    return f"Nice! I've marked this task as done:\n\t{task.display()}"


def unmark_command(task_list: TaskList, suffix: str | None) -> str:
    task = task_list.get(_position(task_list, suffix))
    task.done = False
    return f"OK, I've marked this task as not done yet:\n\t{task.display()}"


def delete_command(task_list: TaskList, suffix: str | None) -> str:
    task = task_list.remove(_position(task_list, suffix))
    logger.debug("Task removed index=%s", task.index)
    return (
        "Noted. I've removed this task:\n"
        f"\t{task.display()}\n"
        f"Now you have {task_list.size()} task(s) in the list."
    )
