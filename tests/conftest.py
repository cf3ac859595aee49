# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_companion.config import Settings
from todo_companion.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test directory.

    Built directly rather than from the environment, to keep unit tests
    isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return Settings(
        app_name="todo-test",
        log_level="WARNING",
        username="Tester",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def write_items(tasks_path: Path):
    """Write raw task items (already in file vocabulary) to the tasks file."""

    def _write(items) -> Path:
        tasks_path.write_text(json.dumps(items, ensure_ascii=False), "utf-8")
        return tasks_path

    return _write
