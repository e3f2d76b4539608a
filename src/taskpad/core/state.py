# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one CLI session works on.

    Built once by cli.bootstrap and passed explicitly to the console loop
    and every command handler.
    """

    # Settings (or a compatible object in tests).
    settings: Any

    task_store: TaskStore
    tasks_path: Path

    # Set when the tasks file exists but could not be read; saving then goes
    # to a side file so the unread original is left alone.
    load_failed: bool = False

    @property
    def save_path(self) -> Path:
        if self.load_failed:
            return self.tasks_path.with_name(self.tasks_path.name + ".recovered")
        return self.tasks_path
