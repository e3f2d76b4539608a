# src/taskpad/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import FIELD_DELIMITER, Task

logger = logging.getLogger(__name__)


class TaskError(ValueError):
    """Base class for user-facing task errors (the loop reports and continues)."""


class InvalidTaskError(TaskError):
    pass


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found.")
        self.task_id = task_id


def add_task(state: AppState, description: str) -> int:
    """
    Validate and add a task; returns the new id.

    Rejects empty text and text containing the field delimiter, which the
    tasks file cannot represent.
    """
    text = (description or "").strip()
    if not text:
        raise InvalidTaskError("Task description cannot be empty.")
    if FIELD_DELIMITER in text:
        raise InvalidTaskError(f"Task description cannot contain '{FIELD_DELIMITER}'.")
    return state.task_store.add(text)


def parse_task_id(raw: str) -> int:
    s = (raw or "").strip()
    if not (s.isascii() and s.isdigit()):
        raise InvalidTaskError(f"Invalid task ID: {raw}")
    return int(s)


def complete_task(state: AppState, raw_id: str) -> int:
    task_id = parse_task_id(raw_id)
    if not state.task_store.complete(task_id):
        raise TaskNotFoundError(task_id)
    return task_id


def list_tasks(state: AppState) -> list[Task]:
    return state.task_store.list_tasks()


def format_task(task: Task) -> str:
    mark = "✓" if task.completed else " "
    return f"[{mark}] {task.id}. {task.description}"
