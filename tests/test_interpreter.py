# tests/test_interpreter.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from taskpad.core.errors import (
    InvalidTaskNumber,
    MissingAtEvent,
    MissingByDeadline,
    MissingDetails,
    UnknownDateTime,
)
from taskpad.core.interpreter import (
    EXIT_SIGNAL,
    bye_command,
    calendar_command,
    deadline_command,
    delete_command,
    event_command,
    find_command,
    list_command,
    mark_command,
    todo_command,
    unmark_command,
)
from taskpad.tasks.dates import DEADLINE_DISPLAY_FORMAT
from taskpad.tasks.task_models import TaskKind, TaskList


def test_todo_added_and_listed_last(task_list: TaskList) -> None:
    todo_command(task_list, "read book")
    reply = todo_command(task_list, "return book")

    assert reply == (
        "Got it. I've added this task:\n"
        "\t[T][✗] return book\n"
        "Now you have 2 task(s) in the list."
    )
    assert task_list.size() == 2
    assert list_command(task_list).splitlines()[-1] == "[T][✗] return book"


@pytest.mark.parametrize("suffix", ["", None, "   "])
def test_todo_without_description_leaves_list_unchanged(task_list: TaskList, suffix) -> None:
    todo_command(task_list, "existing")
    with pytest.raises(MissingDetails):
        todo_command(task_list, suffix)
    assert task_list.size() == 1


def test_deadline_normalizes_date(task_list: TaskList) -> None:
    reply = deadline_command(task_list, "submit report /by 2/12/2021 1800")

    task = task_list.tasks[-1]
    assert task.kind is TaskKind.DEADLINE
    assert task.description == "submit report"
    assert task.by == "2 December 2021, 6:00PM"
    assert "(by: 2 December 2021, 6:00PM)" in reply
    assert reply.startswith("Got it. I've added this task:\n\t[D][✗] submit report")
    assert reply.endswith("Now you have 1 task(s) in the list.")
    assert "PS:" not in reply


def test_deadline_morning_and_midnight_hours(task_list: TaskList) -> None:
    deadline_command(task_list, "a /by 15/1/2022 0905")
    deadline_command(task_list, "b /by 15/1/2022 0000")
    assert task_list.get(1).by == "15 January 2022, 9:05AM"
    assert task_list.get(2).by == "15 January 2022, 12:00AM"


def test_deadline_unknown_date_is_kept_raw_with_postscript(task_list: TaskList) -> None:
    reply = deadline_command(task_list, "submit report /by tomorrow")

    assert task_list.size() == 1
    assert task_list.get(1).by == "tomorrow"
    assert "(by: tomorrow)" in reply
    assert f"\nPS: {UnknownDateTime.message}" in reply
    assert reply.endswith(UnknownDateTime.message)


def test_deadline_short_time_is_kept_raw(task_list: TaskList) -> None:
    reply = deadline_command(task_list, "a /by 2/12/2021 800")

    assert task_list.get(1).by == "2/12/2021 800"
    assert "\nPS: " in reply


def test_deadline_without_by_clause(task_list: TaskList) -> None:
    with pytest.raises(MissingByDeadline):
        deadline_command(task_list, "submit report")
    with pytest.raises(MissingByDeadline):
        deadline_command(task_list, "submit report /by ")
    assert task_list.size() == 0


@pytest.mark.parametrize("suffix", ["", None, "  ", "   /by 2/12/2021 1800"])
def test_deadline_without_details(task_list: TaskList, suffix) -> None:
    with pytest.raises(MissingDetails):
        deadline_command(task_list, suffix)


def test_event_stores_at_verbatim(task_list: TaskList) -> None:
    reply = event_command(task_list, "party /at 5/12/2021 weekend")

    assert "\t[E][✗] party (at: 5/12/2021 weekend)" in reply
    assert task_list.get(1).at == "5/12/2021 weekend"


@pytest.mark.parametrize(
    ("suffix", "error"),
    [
        ("", MissingDetails),
        ("  /at noon", MissingDetails),
        ("party", MissingAtEvent),
        ("party /at ", MissingAtEvent),
    ],
)
def test_event_errors(task_list: TaskList, suffix: str, error) -> None:
    with pytest.raises(error):
        event_command(task_list, suffix)
    assert task_list.size() == 0


def test_list_empty(task_list: TaskList) -> None:
    assert list_command(task_list) == "List is empty."


def test_list_all_variants(task_list: TaskList) -> None:
    todo_command(task_list, "read")
    deadline_command(task_list, "pay /by 1/1/2022 0930")
    event_command(task_list, "meet /at noon")

    assert list_command(task_list) == (
        "Here are the task(s) in your list:\n"
        "[T][✗] read\n"
        "[D][✗] pay (by: 1 January 2022, 9:30AM)\n"
        "[E][✗] meet (at: noon)"
    )


def test_find_is_case_sensitive(task_list: TaskList) -> None:
    todo_command(task_list, "Buy Milk")

    assert find_command(task_list, "milk") == "No matching tasks with that keyword found."
    assert find_command(task_list, "Milk") == (
        "Here are the matching task(s) in your list:\n[T][✗] Buy Milk"
    )


def test_find_empty_keyword_matches_nothing(task_list: TaskList) -> None:
    todo_command(task_list, "anything")
    assert find_command(task_list, "") == "No matching tasks with that keyword found."


def test_find_keeps_list_order(task_list: TaskList) -> None:
    todo_command(task_list, "book flight")
    todo_command(task_list, "laundry")
    event_command(task_list, "book club /at library")

    assert find_command(task_list, "book").splitlines()[1:] == [
        "[T][✗] book flight",
        "[E][✗] book club (at: library)",
    ]


def test_calendar_matches_deadlines_on_date(task_list: TaskList) -> None:
    deadline_command(task_list, "report /by 2/12/2021 1800")
    deadline_command(task_list, "taxes /by 3/12/2021 0900")
    event_command(task_list, "party /at 2/12/2021")
    todo_command(task_list, "2/12/2021")

    assert calendar_command(task_list, "2/12/2021") == (
        "Here are the task(s) in your list on that date:\n"
        "[D][✗] report (by: 2 December 2021, 6:00PM)"
    )
    assert calendar_command(task_list, "02/12/2021").count("[D]") == 1


def test_calendar_no_matches(task_list: TaskList) -> None:
    deadline_command(task_list, "report /by 2/12/2021 1800")
    assert calendar_command(task_list, "1/1/2030") == "No matching deadlines found."


@pytest.mark.parametrize("suffix", ["31/13/2021", "", None, "tomorrow", "2/12/21x"])
def test_calendar_rejects_malformed_date(task_list: TaskList, suffix) -> None:
    with pytest.raises(UnknownDateTime):
        calendar_command(task_list, suffix)


def test_calendar_skips_raw_deadlines(task_list: TaskList) -> None:
    deadline_command(task_list, "vague /by tomorrow")
    deadline_command(task_list, "exact /by 2/12/2021 1800")

    reply = calendar_command(task_list, "2/12/2021")
    assert "exact" in reply
    assert "vague" not in reply


def test_normalized_deadline_reparses_to_same_date(task_list: TaskList) -> None:
    deadline_command(task_list, "x /by 29/2/2024 2359")
    display_by = task_list.get(1).by

    assert datetime.strptime(display_by, DEADLINE_DISPLAY_FORMAT).date() == date(2024, 2, 29)


def test_bye_returns_exit_signal() -> None:
    assert bye_command() == EXIT_SIGNAL


def test_mark_and_unmark_toggle_glyph(task_list: TaskList) -> None:
    todo_command(task_list, "read")

    assert mark_command(task_list, "1") == "Nice! I've marked this task as done:\n\t[T][✓] read"
    assert list_command(task_list).endswith("[T][✓] read")
    assert unmark_command(task_list, "1") == (
        "OK, I've marked this task as not done yet:\n\t[T][✗] read"
    )


@pytest.mark.parametrize("suffix", ["0", "2", "one", "-1"])
def test_mark_rejects_bad_positions(task_list: TaskList, suffix: str) -> None:
    todo_command(task_list, "read")
    with pytest.raises(InvalidTaskNumber):
        mark_command(task_list, suffix)


def test_mark_without_number(task_list: TaskList) -> None:
    with pytest.raises(MissingDetails):
        mark_command(task_list, "")


def test_delete_does_not_reuse_indices(task_list: TaskList) -> None:
    todo_command(task_list, "a")
    todo_command(task_list, "b")

    reply = delete_command(task_list, "2")
    assert reply == (
        "Noted. I've removed this task:\n\t[T][✗] b\nNow you have 1 task(s) in the list."
    )

    todo_command(task_list, "c")
    assert [t.index for t in task_list] == [0, 2]
