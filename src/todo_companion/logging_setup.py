# src/todo_companion/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"
APP_LOGGER_PREFIX = "todo_companion."


class _ConsoleNoiseFilter(logging.Filter):
    """
    stderr shares the terminal with the task menus, so only app records get
    through there; anything else (pendulum, asyncio, captured warnings) must
    be ERROR or worse. todo.log still receives everything.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(APP_LOGGER_PREFIX):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route logs to stderr (filtered, WARNING by default so load/save chatter
    stays out of the menus) and to <log_dir>/todo.log (full detail: skipped
    task entries, save failures with tracebacks).

    Call once from the entrypoint before the store is loaded. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Re-running main() in-process must not stack handlers.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    task_log = logging.FileHandler(str(log_file), encoding="utf-8")
    task_log.setLevel(file_level)
    task_log.setFormatter(fmt)
    root.addHandler(task_log)

    # warnings.warn(...) shows up as 'py.warnings' records.
    logging.captureWarnings(True)
    return log_file
