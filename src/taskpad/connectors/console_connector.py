# src/taskpad/connectors/console_connector.py

"""
Console front ends.

Two ways to drive the same command registry:
- run_console_loop: single-word commands (add <text>, list, complete <id>, quit)
- run_menu_loop: numbered menu that prompts for arguments

Both return when the user quits (or on EOF / Ctrl+C). Saving is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]

EXIT_WORDS = ("quit", "exit", "q")

MENU_TEXT = (
    "\n"
    "1) Add task\n"
    "2) List tasks\n"
    "3) Complete task\n"
    "4) Save and exit"
)


def _read(read_line: ReadLine, prompt: str) -> str | None:
    """Read one line; None means the user ended input."""
    try:
        return read_line(prompt)
    except EOFError:
        logger.info("Console EOF received, exiting.")
        return None
    except KeyboardInterrupt:
        logger.info("Console KeyboardInterrupt, exiting.")
        print()
        return None


def _run_command(state: AppState, name: str, arg: str = "") -> str:
    try:
        return command_registry.dispatch(state, name, arg)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(state: AppState, *, read_line: ReadLine = input) -> None:
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console loop started (commands).")
    print(f"Welcome to {app_name}!")
    print("Commands: add <task>, list, complete <id>, help, quit\n")

    while True:
        raw = _read(read_line, "> ")
        if raw is None:
            break

        line = raw.strip()
        if not line:
            continue

        if line.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    print("Goodbye!")
    logger.info("Console loop finished.")


def run_menu_loop(state: AppState, *, read_line: ReadLine = input) -> None:
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    logger.info("Console loop started (menu).")
    print(f"Welcome to {app_name}!")

    while True:
        print(MENU_TEXT)
        raw = _read(read_line, "Choose an option: ")
        if raw is None:
            break

        choice = raw.strip()

        if choice == "1":
            description = _read(read_line, "Task description: ")
            if description is None:
                break
            print(_run_command(state, "add", description))
        elif choice == "2":
            print(_run_command(state, "list"))
        elif choice == "3":
            raw_id = _read(read_line, "Task ID: ")
            if raw_id is None:
                break
            print(_run_command(state, "complete", raw_id))
        elif choice == "4":
            logger.info("Menu exit selected.")
            break
        else:
            print("Invalid choice. Enter a number from 1 to 4.")

    print("Goodbye!")
    logger.info("Console loop finished.")
