# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_api import TaskError

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Word-command registry used by the console loop (add, list, complete, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def dispatch(self, state: AppState, name: str, arg: str = "") -> str:
        """Run a command by name. Task errors become the reply text."""
        handler = self._handlers.get(name.lower())
        if not handler:
            return f"Unknown command: {name}. Try: {', '.join(self.names())}, quit"

        try:
            return handler(state, arg)
        except TaskError as e:
            logger.debug("Command %s rejected: %s", name, e)
            return str(e)

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "complete 3".
        Returns a reply string, or None for a blank line.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None
        name = parts[0]
        arg = parts[1] if len(parts) > 1 else ""
        return self.dispatch(state, name, arg)

    def names(self) -> list[str]:
        return list(self._help)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        lines.append("  quit - Save tasks and exit.")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, arg: str) -> str:
    task_id = task_api.add_task(state, arg)
    return f"Task {task_id} added."


def cmd_list(state: AppState, arg: str) -> str:
    tasks = task_api.list_tasks(state)
    if not tasks:
        return "No tasks yet. Add one with 'add <task>'."
    lines = ["Your tasks:"]
    lines.extend(task_api.format_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_complete(state: AppState, arg: str) -> str:
    task_id = task_api.complete_task(state, arg)
    return f"Task {task_id} completed."


registry.register("add", cmd_add, help_text="Add a task: add <description>.")
registry.register("list", cmd_list, help_text="List tasks with their status.", aliases=["ls"])
registry.register("complete", cmd_complete, help_text="Mark a task done: complete <id>.", aliases=["done"])
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
