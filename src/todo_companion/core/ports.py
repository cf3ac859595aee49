# src/todo_companion/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console app.

The menu loop depends on Protocols instead of concrete implementations,
so tests can drive it with a scripted console and an in-memory store.
"""

from typing import Protocol

from ..tasks.task_enums import TaskStatus
from ..tasks.task_models import Task
from ..tasks.task_store import LoadResult, SaveResult


class ConsolePort(Protocol):
    """Where prompts are read from and text is written to."""

    async def ask(self, prompt: str) -> str: ...

    def show(self, text: str = "") -> None: ...

    def clear(self) -> None: ...


class TaskRepo(Protocol):
    def add(self, task: Task) -> None: ...

    def get_all(self) -> list[Task]: ...

    def get_by_index(self, index: int) -> Task | None: ...

    def filter_by_status(self, status: TaskStatus) -> list[Task]: ...

    def search_by_title(self, text: str) -> list[Task]: ...

    def load(self) -> LoadResult: ...

    def save(self) -> SaveResult: ...
