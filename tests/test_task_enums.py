# tests/test_task_enums.py

from __future__ import annotations

import pytest

from todo_companion.tasks.task_enums import (
    TaskDifficulty,
    TaskStatus,
    difficulty_from_storage_code,
    difficulty_from_user_input,
    difficulty_to_storage_code,
    status_from_storage_code,
    status_from_user_input,
    status_to_storage_code,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("P", TaskStatus.PENDING),
        ("p", TaskStatus.PENDING),
        ("Pendiente", TaskStatus.PENDING),
        ("e", TaskStatus.IN_PROGRESS),
        ("En curso", TaskStatus.IN_PROGRESS),
        ("en_curso", TaskStatus.IN_PROGRESS),
        (" T ", TaskStatus.FINISHED),
        ("terminada", TaskStatus.FINISHED),
        ("C", TaskStatus.CANCELLED),
        ("CANCELADA", TaskStatus.CANCELLED),
    ],
)
def test_status_from_user_input_accepts_codes_and_names(text: str, expected: TaskStatus) -> None:
    assert status_from_user_input(text) is expected


@pytest.mark.parametrize("text", ["", "   ", None, "X", "done", "PENDING"])
def test_status_from_user_input_rejects_everything_else(text) -> None:
    assert status_from_user_input(text) is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1", TaskDifficulty.EASY),
        ("f", TaskDifficulty.EASY),
        ("Facil", TaskDifficulty.EASY),
        ("fácil", TaskDifficulty.EASY),
        (2, TaskDifficulty.MEDIUM),
        ("M", TaskDifficulty.MEDIUM),
        ("medio", TaskDifficulty.MEDIUM),
        ("3", TaskDifficulty.HARD),
        ("d", TaskDifficulty.HARD),
        ("Dificil", TaskDifficulty.HARD),
        ("DIFÍCIL", TaskDifficulty.HARD),
    ],
)
def test_difficulty_from_user_input(text, expected: TaskDifficulty) -> None:
    assert difficulty_from_user_input(text) is expected


@pytest.mark.parametrize("text", ["", "0", "4", "hard", None])
def test_difficulty_from_user_input_no_match(text) -> None:
    assert difficulty_from_user_input(text) is None


def test_status_storage_codes() -> None:
    assert status_from_storage_code("PENDING") is TaskStatus.PENDING
    assert status_from_storage_code("IN-PROGRESS") is TaskStatus.IN_PROGRESS
    assert status_from_storage_code("in-progress") is TaskStatus.IN_PROGRESS
    assert status_from_storage_code("FINISHED") is TaskStatus.FINISHED
    assert status_from_storage_code("CANCELED") is TaskStatus.CANCELLED

    assert status_from_storage_code("CANCELLED") is TaskStatus.PENDING
    assert status_from_storage_code(None) is TaskStatus.PENDING
    assert status_from_storage_code(3) is TaskStatus.PENDING

    assert status_to_storage_code(TaskStatus.IN_PROGRESS) == "IN-PROGRESS"
    assert status_to_storage_code(TaskStatus.CANCELLED) == "CANCELED"
    assert status_to_storage_code(None) == "PENDING"
    assert status_to_storage_code("whatever") == "PENDING"


@pytest.mark.parametrize("code", ["P", "E", "T", "C"])
def test_user_code_survives_storage_round_trip(code: str) -> None:
    status = status_from_user_input(code)
    assert status is not None
    assert status_from_storage_code(status_to_storage_code(status)) is status
    assert status.code == code


@pytest.mark.parametrize("n", [1, 2, 3])
def test_difficulty_storage_round_trip(n: int) -> None:
    assert difficulty_to_storage_code(difficulty_from_storage_code(n)) == n


@pytest.mark.parametrize("raw", [0, 4, -1, 2.5, "x", None, True, [2], 10**400, "9" * 400])
def test_unknown_difficulty_codes_normalize_to_easy(raw) -> None:
    assert difficulty_from_storage_code(raw) is TaskDifficulty.EASY
    assert difficulty_to_storage_code(difficulty_from_storage_code(raw)) == 1


def test_difficulty_storage_accepts_numeric_strings() -> None:
    assert difficulty_from_storage_code("3") is TaskDifficulty.HARD
    assert difficulty_from_storage_code(2.0) is TaskDifficulty.MEDIUM
    assert difficulty_to_storage_code(None) == 1


def test_display_metadata() -> None:
    assert TaskStatus.IN_PROGRESS.label == "En curso"
    assert TaskStatus.CANCELLED.code == "C"
    assert TaskDifficulty.MEDIUM.label == "Medio"
    assert TaskDifficulty.HARD.stars == "★★★"
