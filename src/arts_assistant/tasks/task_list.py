# src/arts_assistant/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRange
from .task_models import Task


class TaskList:
    """
    Ordered, growable task collection.

    Insertion order is the display order. Indices here are 0-based and always
    contiguous; user-facing 1-based numbers are converted by the parser.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)

    def get_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def remove_task(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-sensitive substring match on descriptions, in list order."""
        return [(i, t) for i, t in enumerate(self._tasks) if keyword in t.description]

    def get_tasks(self) -> list[Task]:
        """Snapshot for the store; mutating the returned list does not affect this one."""
        return list(self._tasks)

    def _check_index(self, index: int) -> None:
        # Explicit check: negative indices must not wrap around.
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRange()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
