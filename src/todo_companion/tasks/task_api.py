# src/todo_companion/tasks/task_api.py

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable

from .dates import NO_DATA, parse_date
from .errors import ValidationError
from .task_enums import TaskDifficulty, TaskStatus
from .task_models import Task

logger = logging.getLogger(__name__)


def build_task(
    title: str,
    description: str | None = None,
    status_text: str = "",
    difficulty_text: str = "",
    due_text: str = "",
) -> Task:
    """
    Add-flow: build a Task from raw console answers.

    Blank status/difficulty fall back to Pending/Easy. Unlike the Task
    constructor, an unparsable due date is rejected here.
    """
    status = TaskStatus.PENDING
    if status_text and status_text.strip():
        parsed_status = TaskStatus.from_user_input(status_text)
        if parsed_status is None:
            raise ValidationError("Invalid status: use P/E/T/C or name.")
        status = parsed_status

    difficulty = TaskDifficulty.EASY
    if difficulty_text and difficulty_text.strip():
        parsed_difficulty = TaskDifficulty.from_user_input(difficulty_text)
        if parsed_difficulty is None:
            raise ValidationError("Invalid difficulty: use 1/2/3 or F/M/D.")
        difficulty = parsed_difficulty

    due_at = None
    if due_text and due_text.strip():
        due_at = parse_date(due_text)
        if due_at is None:
            raise ValidationError("Invalid due date.")

    task = Task(
        title=title,
        description=description,
        status=status,
        difficulty=difficulty,
        due_at=due_at,
    )
    logger.debug("Task built title=%r status=%s difficulty=%s", task.title, status.value, int(difficulty))
    return task


def _sort_key(task: Task) -> str:
    # Case- and accent-insensitive ("Árbol" sorts with "arbol").
    decomposed = unicodedata.normalize("NFKD", task.title)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def sort_for_display(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=_sort_key)


def describe_difficulty(difficulty: TaskDifficulty | None) -> str:
    if difficulty is None:
        return NO_DATA
    return f"{difficulty.label} ({difficulty.stars})"
