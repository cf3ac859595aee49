# src/todo_companion/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Settings
    task_store: TaskStore

    @property
    def username(self) -> str:
        return self.settings.username
