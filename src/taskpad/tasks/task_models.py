# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

FIELD_DELIMITER = "|"


class CompletionFlag(StrEnum):
    """Completion marker as written to the tasks file."""

    TRUE = "true"
    FALSE = "false"

    @classmethod
    def from_field(cls, raw: str | None) -> CompletionFlag:
        # Only the exact literal counts as done; anything else reads as open.
        if raw == cls.TRUE.value:
            return cls.TRUE
        return cls.FALSE

    @classmethod
    def from_bool(cls, completed: bool) -> CompletionFlag:
        return cls.TRUE if completed else cls.FALSE

    def as_bool(self) -> bool:
        return self is CompletionFlag.TRUE


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False


@dataclass(slots=True, frozen=True)
class StorageResult:
    """
    Outcome of reading or writing the tasks file.

    - ok: False only when an I/O error happened
    - missing: load found no file (first run); still ok
    - count: tasks loaded or written
    - skipped: malformed lines dropped during load
    """

    ok: bool
    path: Path
    count: int = 0
    skipped: int = 0
    missing: bool = False
    error: str | None = None
