# src/taskpad/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

DONE_GLYPH = "✓"
NOT_DONE_GLYPH = "✗"


class TaskKind(StrEnum):
    """
    Task variant discriminant.

    Values are the stored form (see TaskStore); `tag` is the display letter.
    """

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def tag(self) -> str:
        match self:
            case TaskKind.TODO:
                return "T"
            case TaskKind.DEADLINE:
                return "D"
            case TaskKind.EVENT:
                return "E"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskKind | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    index: int
    kind: TaskKind
    description: str
    done: bool = False

    # Deadline only: normalized "d MMMM yyyy, h:mma" text or the raw token.
    by: str | None = None
    # Event only: stored verbatim.
    at: str | None = None

    @classmethod
    def todo(cls, index: int, description: str, *, done: bool = False) -> Task:
        return cls(index=index, kind=TaskKind.TODO, description=description, done=done)

    @classmethod
    def deadline(cls, index: int, description: str, by: str, *, done: bool = False) -> Task:
        return cls(index=index, kind=TaskKind.DEADLINE, description=description, done=done, by=by)

    @classmethod
    def event(cls, index: int, description: str, at: str, *, done: bool = False) -> Task:
        return cls(index=index, kind=TaskKind.EVENT, description=description, done=done, at=at)

    @property
    def glyph(self) -> str:
        return DONE_GLYPH if self.done else NOT_DONE_GLYPH

    def display(self) -> str:
        head = f"[{self.kind.tag}][{self.glyph}] {self.description}"
        match self.kind:
            case TaskKind.TODO:
                return head
            case TaskKind.DEADLINE:
                return f"{head} (by: {self.by})"
            case TaskKind.EVENT:
                return f"{head} (at: {self.at})"

    def __str__(self) -> str:
        return self.display()


class TaskList:
    """
    Ordered, in-memory task collection.

    Positions exposed to users are 1-based; `Task.index` is the zero-based
    sequence number handed out at creation and never re-used.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._next_index = max((t.index for t in self._tasks), default=-1) + 1

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def next_index(self) -> int:
        return self._next_index

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        self._next_index = max(self._next_index, task.index + 1)

    def get(self, position: int) -> Task:
        """Return the task at 1-based `position` (IndexError if out of range)."""
        if position < 1 or position > len(self._tasks):
            raise IndexError(position)
        return self._tasks[position - 1]

    def remove(self, position: int) -> Task:
        task = self.get(position)
        del self._tasks[position - 1]
        return task
