# tests/test_task_api.py

from __future__ import annotations

import pytest

from todo_companion.tasks.dates import parse_date
from todo_companion.tasks.errors import ValidationError
from todo_companion.tasks.task_api import build_task, describe_difficulty, sort_for_display
from todo_companion.tasks.task_enums import TaskDifficulty, TaskStatus
from todo_companion.tasks.task_models import Task


def test_build_task_blank_answers_use_defaults() -> None:
    task = build_task("  Comprar pan ", "", "", "", "")
    assert task.title == "Comprar pan"
    assert task.description is None
    assert task.status is TaskStatus.PENDING
    assert task.difficulty is TaskDifficulty.EASY
    assert task.due_at is None


def test_build_task_parses_every_answer() -> None:
    task = build_task("Pasear al perro", "30 minutos", "E", "m", "01/12/2025 18:00")
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.difficulty is TaskDifficulty.MEDIUM
    assert task.due_at == parse_date("2025-12-01 18:00")


@pytest.mark.parametrize(
    ("answers", "message"),
    [
        (("", "", "", "", ""), "title"),
        (("t", "", "Z", "", ""), "P/E/T/C"),
        (("t", "", "", "5", ""), "1/2/3"),
        (("t", "", "", "", "mañana"), "due date"),
        (("t", "d" * 501, "", "", ""), "500"),
    ],
)
def test_build_task_rejects_bad_answers(answers, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        build_task(*answers)


def test_sort_for_display_ignores_case_and_accents() -> None:
    tasks = [Task(title="banana"), Task(title="Árbol"), Task(title="apio"), Task(title="Cebolla")]
    assert [t.title for t in sort_for_display(tasks)] == ["apio", "Árbol", "banana", "Cebolla"]
    # Input is not reordered in place.
    assert tasks[0].title == "banana"


def test_describe_difficulty() -> None:
    assert describe_difficulty(TaskDifficulty.MEDIUM) == "Medio (★★☆)"
    assert describe_difficulty(None) == "Sin datos"
