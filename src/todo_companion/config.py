# src/todo_companion/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Everything has a default; a bare checkout runs without any configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    username: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        username = _env(_k("USERNAME"), "Usuario")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "tasks.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            username=username,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
