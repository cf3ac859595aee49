# src/todo_companion/tasks/task_enums.py

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The member value is the storage code written to tasks.json.
    Users type a one-letter code (P/E/T/C) or the Spanish label instead.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN-PROGRESS"
    FINISHED = "FINISHED"
    CANCELLED = "CANCELED"

    @property
    def code(self) -> str:
        return _STATUS_META[self][0]

    @property
    def label(self) -> str:
        return _STATUS_META[self][1]

    @classmethod
    def from_storage(cls, raw: Any) -> TaskStatus:
        if not raw or not isinstance(raw, str):
            return cls.PENDING
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return cls.PENDING

    @classmethod
    def from_user_input(cls, raw: Any) -> TaskStatus | None:
        if raw is None:
            return None
        return _STATUS_INPUTS.get(str(raw).strip().upper())


class TaskDifficulty(IntEnum):
    """Effort tag; the member value is the numeric storage code."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return _DIFFICULTY_META[self][0]

    @property
    def stars(self) -> str:
        return _DIFFICULTY_META[self][1]

    @classmethod
    def from_storage(cls, raw: Any) -> TaskDifficulty:
        if isinstance(raw, bool) or raw is None:
            return cls.EASY
        try:
            number = float(raw)
        except (TypeError, ValueError, OverflowError):
            return cls.EASY
        if not number.is_integer():
            return cls.EASY
        try:
            return cls(int(number))
        except ValueError:
            return cls.EASY

    @classmethod
    def from_user_input(cls, raw: Any) -> TaskDifficulty | None:
        if raw is None or isinstance(raw, bool):
            return None
        return _DIFFICULTY_INPUTS.get(str(raw).strip().upper())


_STATUS_META: dict[TaskStatus, tuple[str, str]] = {
    TaskStatus.PENDING: ("P", "Pendiente"),
    TaskStatus.IN_PROGRESS: ("E", "En curso"),
    TaskStatus.FINISHED: ("T", "Terminada"),
    TaskStatus.CANCELLED: ("C", "Cancelada"),
}

_STATUS_INPUTS: dict[str, TaskStatus] = {
    "P": TaskStatus.PENDING,
    "PENDIENTE": TaskStatus.PENDING,
    "E": TaskStatus.IN_PROGRESS,
    "EN CURSO": TaskStatus.IN_PROGRESS,
    "EN_CURSO": TaskStatus.IN_PROGRESS,
    "T": TaskStatus.FINISHED,
    "TERMINADA": TaskStatus.FINISHED,
    "C": TaskStatus.CANCELLED,
    "CANCELADA": TaskStatus.CANCELLED,
}

_DIFFICULTY_META: dict[TaskDifficulty, tuple[str, str]] = {
    TaskDifficulty.EASY: ("Fácil", "★☆☆"),
    TaskDifficulty.MEDIUM: ("Medio", "★★☆"),
    TaskDifficulty.HARD: ("Difícil", "★★★"),
}

_DIFFICULTY_INPUTS: dict[str, TaskDifficulty] = {
    "1": TaskDifficulty.EASY,
    "F": TaskDifficulty.EASY,
    "FACIL": TaskDifficulty.EASY,
    "FÁCIL": TaskDifficulty.EASY,
    "2": TaskDifficulty.MEDIUM,
    "M": TaskDifficulty.MEDIUM,
    "MEDIO": TaskDifficulty.MEDIUM,
    "3": TaskDifficulty.HARD,
    "D": TaskDifficulty.HARD,
    "DIFICIL": TaskDifficulty.HARD,
    "DIFÍCIL": TaskDifficulty.HARD,
}


# ---- function-style translators (used by the store and the console app) ----


def status_from_user_input(text: Any) -> TaskStatus | None:
    return TaskStatus.from_user_input(text)


def difficulty_from_user_input(text: Any) -> TaskDifficulty | None:
    return TaskDifficulty.from_user_input(text)


def status_from_storage_code(code: Any) -> TaskStatus:
    return TaskStatus.from_storage(code)


def status_to_storage_code(status: Any) -> str:
    if isinstance(status, TaskStatus):
        return status.value
    return TaskStatus.PENDING.value


def difficulty_from_storage_code(code: Any) -> TaskDifficulty:
    return TaskDifficulty.from_storage(code)


def difficulty_to_storage_code(difficulty: Any) -> int:
    if isinstance(difficulty, TaskDifficulty):
        return int(difficulty)
    return int(TaskDifficulty.EASY)
