# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from .task_models import FIELD_DELIMITER, CompletionFlag, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list with a monotonic id counter.

    Insertion order is display order. Ids come from the store and are never
    reused within a run; after deserialize() the counter continues from the
    highest id that was read.

    The store does not validate descriptions. Callers (see task_api) reject
    empty text and text containing the field delimiter before calling add().
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add(self, description: str) -> int:
        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=description))
        self._next_id += 1
        logger.debug("Task added id=%s", task_id)
        return task_id

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order (copies, safe to keep)."""
        return [replace(t) for t in self._tasks]

    def complete(self, task_id: int) -> bool:
        for task in self._tasks:
            if task.id == task_id:
                task.completed = True
                logger.debug("Task completed id=%s", task_id)
                return True
        logger.debug("Task not found id=%s", task_id)
        return False

    # ---- text encoding ----

    def serialize(self) -> str:
        return "".join(
            f"{t.id}{FIELD_DELIMITER}{t.description}{FIELD_DELIMITER}"
            f"{CompletionFlag.from_bool(t.completed).value}\n"
            for t in self._tasks
        )

    def deserialize(self, text: str) -> int:
        """
        Replace the whole store with the tasks encoded in `text`.

        A line is kept only if it has exactly three fields and the first one
        is a non-negative decimal integer. Lines that fail either check, or
        that repeat an id already read, are skipped. Blank lines are ignored.

        Returns the number of skipped lines.
        """
        tasks: list[Task] = []
        seen: set[int] = set()
        skipped = 0

        for line in text.split("\n"):
            line = line.removesuffix("\r")
            if not line:
                continue

            parts = line.split(FIELD_DELIMITER)
            if len(parts) != 3:
                skipped += 1
                continue

            raw_id, description, raw_flag = parts
            if not (raw_id.isascii() and raw_id.isdigit()):
                skipped += 1
                continue

            task_id = int(raw_id)
            if task_id in seen:
                skipped += 1
                continue
            seen.add(task_id)

            tasks.append(
                Task(
                    id=task_id,
                    description=description,
                    completed=CompletionFlag.from_field(raw_flag).as_bool(),
                )
            )

        self._tasks = tasks
        self._next_id = max(seen) + 1 if seen else 1

        if skipped:
            logger.info("Skipped %d malformed task line(s).", skipped)
        logger.debug("Deserialized %d task(s), next_id=%s", len(tasks), self._next_id)
        return skipped
