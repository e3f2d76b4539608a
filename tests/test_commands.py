# tests/test_commands.py

from __future__ import annotations

import pytest

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.tasks import task_api
from taskpad.tasks.task_api import InvalidTaskError, TaskNotFoundError


def test_registry_routes_names_and_aliases(state) -> None:
    reg = CommandRegistry()
    calls: list[str] = []

    def handler(state, arg):
        calls.append(arg)
        return "ok"

    reg.register("echo", handler, "echo", aliases=["e"])

    assert reg.handle(state, "echo hello   world") == "ok"
    assert reg.handle(state, "E again") == "ok"
    assert calls == ["hello   world", "again"]


def test_registry_blank_and_unknown(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "   ") is None
    assert "Unknown command: nope" in (reg.handle(state, "nope") or "")


def test_add_list_complete_flow(state) -> None:
    assert registry.handle(state, "add Buy milk") == "Task 1 added."
    assert registry.handle(state, "add Walk dog") == "Task 2 added."
    assert registry.handle(state, "complete 1") == "Task 1 completed."

    listing = registry.handle(state, "list")
    assert listing == "Your tasks:\n[✓] 1. Buy milk\n[ ] 2. Walk dog"


def test_list_empty(state) -> None:
    assert "No tasks yet" in (registry.handle(state, "list") or "")


def test_errors_become_replies(state) -> None:
    assert registry.handle(state, "add") == "Task description cannot be empty."
    assert registry.handle(state, "add a | b") == "Task description cannot contain '|'."
    assert registry.handle(state, "complete 5") == "Task 5 not found."
    assert registry.handle(state, "complete abc") == "Invalid task ID: abc"
    assert state.task_store.count_tasks() == 0


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "help") or ""
    for name in ("add", "list", "complete", "quit"):
        assert name in text


def test_task_api_validation(state) -> None:
    assert task_api.add_task(state, "  padded  ") == 1
    assert state.task_store.list_tasks()[0].description == "padded"

    with pytest.raises(InvalidTaskError):
        task_api.add_task(state, "   ")
    with pytest.raises(InvalidTaskError):
        task_api.complete_task(state, "-1")
    with pytest.raises(TaskNotFoundError) as exc:
        task_api.complete_task(state, "9")
    assert exc.value.task_id == 9
    assert task_api.complete_task(state, " 1 ") == 1


def test_dispatch_used_by_menu(state) -> None:
    assert registry.dispatch(state, "add", "Buy milk") == "Task 1 added."
    assert registry.dispatch(state, "COMPLETE", "1") == "Task 1 completed."
    assert registry.dispatch(state, "list") == "Your tasks:\n[✓] 1. Buy milk"
    assert "Unknown command: save" in registry.dispatch(state, "save")
