# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from typing import Protocol

from ..tasks.task_models import TaskList


class TaskRepo(Protocol):
    """Persistence for the whole task list (load once, save after changes)."""

    def load_tasks(self) -> TaskList: ...
    def save_tasks(self, task_list: TaskList) -> None: ...
    def count_tasks(self) -> int: ...
