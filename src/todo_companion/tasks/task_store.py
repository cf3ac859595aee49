# src/todo_companion/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .dates import parse_date, to_instant_string
from .errors import CorruptDataError, PersistenceReadError, PersistenceWriteError, ValidationError
from .task_enums import (
    TaskDifficulty,
    TaskStatus,
    difficulty_from_storage_code,
    difficulty_to_storage_code,
    status_from_storage_code,
    status_to_storage_code,
)
from .task_models import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadResult:
    loaded: int
    skipped: int
    seeded: bool = False


@dataclass(frozen=True, slots=True)
class SaveResult:
    saved: int
    path: Path


class TaskStore:
    """
    In-memory, ordered task list persisted wholesale to one JSON file.

    The file uses its own vocabulary (see _task_to_item / _item_to_task):
    Spanish keys, "PENDING"/"IN-PROGRESS"/... status codes, 1/2/3 difficulty codes
    and ISO-8601 UTC instants.

    load() replaces the current contents; save() rewrites the whole file
    through a temp file + os.replace.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- queries ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get_all(self) -> list[Task]:
        return list(self._tasks)

    def get_by_index(self, index: int) -> Task | None:
        if index < 0 or index >= len(self._tasks):
            return None
        return self._tasks[index]

    def filter_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._tasks if t.status == status]

    def search_by_title(self, text: str) -> list[Task]:
        query = (text or "").strip().lower()
        return [t for t in self._tasks if query in t.title.lower()]

    # ---- (de)serialization helpers ----

    @staticmethod
    def _task_to_item(task: Task) -> dict[str, Any]:
        return {
            "titulo": task.title,
            "descripcion": task.description,
            "estado": status_to_storage_code(task.status),
            "creacion": to_instant_string(task.created_at),
            "ultimaEdicion": to_instant_string(task.updated_at),
            "vencimiento": to_instant_string(task.due_at),
            "dificultad": difficulty_to_storage_code(task.difficulty),
        }

    @staticmethod
    def _item_to_task(item: Any) -> Task:
        if not isinstance(item, dict):
            raise ValidationError(f"Task entry is not an object: {type(item).__name__}")
        return Task(
            title=item.get("titulo"),
            description=item.get("descripcion"),
            status=status_from_storage_code(item.get("estado")),
            difficulty=difficulty_from_storage_code(item.get("dificultad")),
            due_at=item.get("vencimiento"),
            created_at=item.get("creacion"),
            updated_at=item.get("ultimaEdicion"),
        )

    # ---- persistence ----

    def load(self) -> LoadResult:
        """
        Replace the store with the contents of the tasks file.

        Missing file -> demo seed (not an error).
        Unreadable file -> PersistenceReadError; invalid JSON / non-array -> CorruptDataError.
        Both leave the store untouched. Invalid entries are skipped and counted.
        """
        if not self._path.exists():
            logger.info("Tasks file %s not found; using demo data.", self._path)
            seeded = self.seed_demo()
            return LoadResult(loaded=len(self._tasks), skipped=0, seeded=seeded)

        try:
            raw = self._path.read_text("utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptDataError(f"Tasks file {self._path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise PersistenceReadError(f"Cannot read tasks file {self._path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, oversized integer literals, pathological nesting.
            raise CorruptDataError(f"Tasks file {self._path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise CorruptDataError(f"Tasks file {self._path} does not contain a JSON array.")

        tasks: list[Task] = []
        skipped = 0
        for pos, item in enumerate(data):
            try:
                tasks.append(self._item_to_task(item))
            except ValidationError as exc:
                skipped += 1
                title = item.get("titulo") if isinstance(item, dict) else None
                logger.warning("Skipping invalid task #%d (%r): %s", pos, title or "untitled", exc)

        self._tasks = tasks
        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return LoadResult(loaded=len(tasks), skipped=skipped)

    def save(self) -> SaveResult:
        """Serialize every task and atomically replace the tasks file."""
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            items = [self._task_to_item(t) for t in self._tasks]
        except (ValueError, OverflowError) as exc:
            logger.exception("Failed to serialize tasks for %s", self._path)
            raise PersistenceWriteError(f"Cannot serialize tasks for {self._path}: {exc}") from exc

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            logger.exception("Failed to save tasks to %s", self._path)
            raise PersistenceWriteError(f"Cannot write tasks file {self._path}: {exc}") from exc

        logger.info("Saved %d tasks to %s", len(items), self._path)
        return SaveResult(saved=len(items), path=self._path)

    def seed_demo(self) -> bool:
        """Populate three example tasks; no-op (False) when the store is not empty."""
        if self._tasks:
            return False

        self._tasks.extend(
            [
                Task(
                    title="Comprar Huevos",
                    description="Ir al súper y comprar una docena",
                    status=TaskStatus.PENDING,
                    difficulty=TaskDifficulty.EASY,
                ),
                Task(
                    title="Pasear al perro",
                    description="Ejercitar 30 minutos",
                    status=TaskStatus.IN_PROGRESS,
                    difficulty=TaskDifficulty.MEDIUM,
                    due_at=parse_date("2025-12-01 18:00"),
                ),
                Task(
                    title="Terminar práctico de BD",
                    status=TaskStatus.FINISHED,
                    difficulty=TaskDifficulty.HARD,
                ),
            ]
        )
        logger.debug("Demo tasks seeded.")
        return True
