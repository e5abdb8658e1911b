# src/taskpad/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..tasks.task_models import TaskList
from .ports import TaskRepo

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    # Settings live on the state so connectors don't re-read config.
    settings: object

    task_store: TaskRepo
    task_list: TaskList = field(default_factory=TaskList)

    autosave: bool = True
    dirty: bool = False

    def persist(self) -> None:
        """Save the task list if it changed since the last save."""
        if not self.dirty:
            return
        self.task_store.save_tasks(self.task_list)
        self.dirty = False
        logger.debug("Task list saved (%d tasks).", self.task_list.size())
