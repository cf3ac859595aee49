# src/todo_companion/tasks/task_models.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from .dates import ensure_aware, now_local, parse_date
from .errors import ValidationError
from .task_enums import TaskDifficulty, TaskStatus

logger = logging.getLogger(__name__)

TITLE_MAX = 100
DESCRIPTION_MAX = 500

# Update inputs: KEEP leaves a field as is, CLEAR empties an optional field.
KEEP = ""
CLEAR = " "


def _normalize_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip() or len(title.strip()) > TITLE_MAX:
        raise ValidationError(f"Invalid title: required, 1..{TITLE_MAX} characters.")
    return title.strip()


def _normalize_description(description: Any) -> str | None:
    if description is None:
        return None
    if not isinstance(description, str) or len(description.strip()) > DESCRIPTION_MAX:
        raise ValidationError(f"Invalid description: must be ≤{DESCRIPTION_MAX} chars.")
    return description.strip() or None


def _coerce_timestamp(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return ensure_aware(value)
    parsed = parse_date(value) if isinstance(value, str) else None
    if parsed is None:
        raise ValidationError(f"Invalid {field_name} timestamp: {value!r}")
    return parsed


def _coerce_status(value: Any) -> TaskStatus:
    if value is None:
        return TaskStatus.PENDING
    if isinstance(value, TaskStatus):
        return value
    status = TaskStatus.from_user_input(value)
    if status is None:
        raise ValidationError("Invalid status: use P/E/T/C or name.")
    return status


def _coerce_difficulty(value: Any) -> TaskDifficulty:
    if value is None:
        return TaskDifficulty.EASY
    if isinstance(value, TaskDifficulty):
        return value
    difficulty = TaskDifficulty.from_user_input(value)
    if difficulty is None:
        raise ValidationError("Invalid difficulty: use 1/2/3 or F/M/D.")
    return difficulty


class Task:
    """
    One to-do item.

    Construction validates title/description and the two bookkeeping timestamps
    (created_at / updated_at accept a datetime or any string parse_date understands).
    A due date that cannot be parsed is dropped silently; apply_update() is strict.
    """

    __slots__ = ("title", "description", "status", "difficulty", "due_at", "created_at", "updated_at")

    def __init__(
        self,
        title: str,
        description: str | None = None,
        status: TaskStatus | str | None = TaskStatus.PENDING,
        difficulty: TaskDifficulty | str | None = TaskDifficulty.EASY,
        due_at: datetime | str | None = None,
        created_at: datetime | str | None = None,
        updated_at: datetime | str | None = None,
    ) -> None:
        self.title: str = _normalize_title(title)
        self.description: str | None = _normalize_description(description)
        self.status: TaskStatus = _coerce_status(status)
        self.difficulty: TaskDifficulty = _coerce_difficulty(difficulty)

        self.created_at: datetime = (
            _coerce_timestamp(created_at, "creation") if created_at else now_local()
        )
        self.updated_at: datetime = (
            _coerce_timestamp(updated_at, "last edit") if updated_at else self.created_at
        )

        self.due_at: datetime | None = None
        if isinstance(due_at, datetime):
            self.due_at = ensure_aware(due_at)
        elif due_at:
            self.due_at = parse_date(due_at)
            if self.due_at is None:
                logger.debug("Dropping unparsable due date %r for task %r", due_at, self.title)

    def apply_update(
        self,
        *,
        description: str | None = None,
        status: str | None = None,
        difficulty: str | None = None,
        due: str | None = None,
    ) -> None:
        """
        Update the editable fields from raw console answers.

        Per field: None = not part of the update, "" = keep, " " = clear
        (description and due only), anything else is validated.
        Every field is checked before any is written, so a failure leaves the task untouched.
        """
        changes: dict[str, Any] = {}

        if description is not None and description != KEEP:
            if description == CLEAR:
                changes["description"] = None
            else:
                changes["description"] = _normalize_description(description)

        if status is not None and status != KEEP:
            new_status = TaskStatus.from_user_input(status)
            if new_status is None:
                raise ValidationError("Invalid status: use P/E/T/C or name.")
            changes["status"] = new_status

        if difficulty is not None and difficulty != KEEP:
            new_difficulty = TaskDifficulty.from_user_input(difficulty)
            if new_difficulty is None:
                raise ValidationError("Invalid difficulty: use 1/2/3 or F/M/D.")
            changes["difficulty"] = new_difficulty

        if due is not None and due != KEEP:
            if due == CLEAR:
                changes["due_at"] = None
            else:
                new_due = parse_date(due)
                if new_due is None:
                    raise ValidationError("Invalid due date.")
                changes["due_at"] = new_due

        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = now_local()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(title={self.title!r}, status={self.status.name}, difficulty={self.difficulty.name})"
