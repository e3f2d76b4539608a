# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the tasks file, runs the chosen
console front end, and saves on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_tasks, save_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, run_menu_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    log_file = settings.log_file_path if settings.log_to_file else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.info("Starting %s (tasks=%s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    load_tasks(state)

    try:
        if settings.frontend == "menu":
            run_menu_loop(state)
        else:
            run_console_loop(state)
    finally:
        save_tasks(state)
        logger.info("Bye.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
