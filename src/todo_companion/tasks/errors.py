# src/todo_companion/tasks/errors.py

"""
Error taxonomy of the task subsystem.

- ValidationError: a field fails its constraint. Recoverable, nothing mutated.
- StorageError subclasses: the tasks file could not be read, parsed or written.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every error raised by the task subsystem."""


class ValidationError(TaskError, ValueError):
    pass


class StorageError(TaskError):
    """File-level failure while loading or saving the store."""


class CorruptDataError(StorageError):
    """The tasks file exists but is not a JSON array. Fatal for the session."""


class PersistenceReadError(StorageError):
    pass


class PersistenceWriteError(StorageError):
    """Saving failed; the in-memory store is still authoritative."""
