# src/arts_assistant/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from .dates import format_display


class TaskKind(StrEnum):
    """
    Task variant.

    The value doubles as the one-letter marker used both in the rendered
    line ("[T]") and in the store ("T | 0 | ...").
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_marker(cls, raw: str) -> TaskKind:
        return cls(raw.strip().upper())


@dataclass(slots=True)
class Task:
    description: str
    done: bool = field(default=False, kw_only=True)

    kind = TaskKind.TODO

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def _details(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}{self._details()}"


@dataclass(slots=True)
class Todo(Task):
    kind = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    due_at: datetime

    kind = TaskKind.DEADLINE

    def _details(self) -> str:
        return f" (by: {format_display(self.due_at)})"


@dataclass(slots=True)
class Event(Task):
    """
    Time-ranged task.

    start_at <= end_at is not enforced; a reversed range is stored and shown
    as entered.
    """

    start_at: datetime
    end_at: datetime

    kind = TaskKind.EVENT

    def _details(self) -> str:
        return f" (from: {format_display(self.start_at)} to: {format_display(self.end_at)})"
