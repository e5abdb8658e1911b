# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import Task, TaskKind, TaskList

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task list store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    The whole list is saved at once: rows are replaced in a single transaction
    and `position` keeps the list order.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    position INTEGER NOT NULL,
                    task_index INTEGER NOT NULL,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    done INTEGER NOT NULL DEFAULT 0
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("by_text", "TEXT")
            add_col("at_text", "TEXT")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)")
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task | None:
        kind = TaskKind.from_db(row["kind"])
        if kind is None:
            logger.warning("Skipping stored task with unknown kind=%r", row["kind"])
            return None
        return Task(
            index=int(row["task_index"]),
            kind=kind,
            description=str(row["description"] or ""),
            done=bool(row["done"]),
            by=row["by_text"],
            at=row["at_text"],
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def load_tasks(self) -> TaskList:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY position ASC").fetchall()
        finally:
            conn.close()

        tasks = [t for t in (self._row_to_task(r) for r in rows) if t is not None]
        logger.debug("Loaded %d task(s) from %s", len(tasks), self._db_path)
        return TaskList(tasks)

    def save_tasks(self, task_list: TaskList) -> None:
        rows = [
            (pos, t.index, t.kind.value, t.description, int(t.done), t.by, t.at)
            for pos, t in enumerate(task_list, start=1)
        ]

        conn = self._get_conn()
        try:
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks(position, task_index, kind, description, done, by_text, at_text)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    rows,
                )
            logger.debug("Saved %d task(s) to %s", len(rows), self._db_path)
        finally:
            conn.close()
