# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task file, runs the menu
loop in the main thread. Tasks are saved only by the menu's quit command.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, load_tasks_into_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import TaskFileError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=settings.log_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    load_tasks_into_state(state)

    try:
        saved = run_console_loop(state)
    except TaskFileError:
        logger.exception("Failed to save tasks.")
        sys.exit(1)

    logger.info("Bye (saved=%s).", saved)


if __name__ == "__main__":
    main()
