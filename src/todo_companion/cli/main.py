# src/todo_companion/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu on an
asyncio loop until the user leaves (tasks are saved on the way out).
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import StdConsole, TodoApp
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    app = TodoApp(StdConsole(), state.task_store, username=state.username)

    try:
        ok = asyncio.run(app.run())
    except KeyboardInterrupt:
        # Leave through the same door as "[0] Salir".
        logger.info("KeyboardInterrupt, saving and exiting.")
        print()
        ok = app.save_on_interrupt()

    logger.info("Bye.")
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
