# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="WARNING",
        log_to_file=False,
        frontend="commands",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=settings.tasks_path,
    )


@pytest.fixture()
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """
    Build a read_line replacement that replays the given lines, then raises
    EOFError like input() does at end of stream.
    """

    def build(*lines: str) -> Callable[[str], str]:
        it = iter(lines)

        def read_line(prompt: str) -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return read_line

    return build
