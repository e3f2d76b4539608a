# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the single AppState (one TaskStore per run),
- loads the tasks file at startup and saves it at exit.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_file import load_tasks_file, save_tasks_file
from ..tasks.task_models import StorageResult
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=Path(settings.tasks_path),
    )


def load_tasks(state: AppState) -> StorageResult:
    result = load_tasks_file(state.task_store, state.tasks_path)
    if not result.ok:
        state.load_failed = True
        print(
            f"Warning: could not read {result.path} ({result.error}). "
            f"Starting with an empty list; it will be saved to {state.save_path} "
            "and the original file will not be touched."
        )
    return result


def save_tasks(state: AppState) -> StorageResult:
    result = save_tasks_file(state.task_store, state.save_path)
    if result.ok:
        print(f"Saved {result.count} task(s) to {result.path}.")
    else:
        print(f"Warning: could not save tasks to {result.path} ({result.error}).")
    return result
