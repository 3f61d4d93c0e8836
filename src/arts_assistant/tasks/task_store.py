# src/arts_assistant/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageReadFailure, StorageWriteFailure
from .dates import format_storage, parse_storage
from .task_models import Deadline, Event, Task, TaskKind, Todo

logger = logging.getLogger(__name__)

DELIMITER = " | "


class CorruptLine(ValueError):
    """A single store line that cannot be decoded."""


def _decode_bytes(raw_line: bytes) -> str:
    try:
        return raw_line.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CorruptLine(f"not valid UTF-8: {e}") from e


def encode_task(task: Task) -> str:
    fields = [str(task.kind), "1" if task.done else "0", task.description]
    if isinstance(task, Deadline):
        fields.append(format_storage(task.due_at))
    elif isinstance(task, Event):
        fields.append(format_storage(task.start_at))
        fields.append(format_storage(task.end_at))
    return DELIMITER.join(fields)


def decode_line(line: str) -> Task:
    """
    Decode one store line.

    Kind and done flag are taken from the left, dates from the right, so a
    description may itself contain the delimiter.
    """
    head = line.split(DELIMITER, 2)
    if len(head) != 3:
        raise CorruptLine(f"expected at least 3 fields, got {len(head)}")
    marker, done_raw, rest = head

    try:
        kind = TaskKind.from_marker(marker)
    except ValueError:
        raise CorruptLine(f"unknown kind marker {marker!r}") from None

    done_raw = done_raw.strip()
    if done_raw not in ("0", "1"):
        raise CorruptLine(f"bad done flag {done_raw!r}")
    done = done_raw == "1"

    try:
        if kind is TaskKind.TODO:
            task: Task = Todo(rest, done=done)
        elif kind is TaskKind.DEADLINE:
            parts = rest.rsplit(DELIMITER, 1)
            if len(parts) != 2:
                raise CorruptLine("deadline needs a due date")
            task = Deadline(parts[0], parse_storage(parts[1]), done=done)
        else:
            parts = rest.rsplit(DELIMITER, 2)
            if len(parts) != 3:
                raise CorruptLine("event needs start and end dates")
            task = Event(parts[0], parse_storage(parts[1]), parse_storage(parts[2]), done=done)
    except CorruptLine:
        raise
    except ValueError as e:
        raise CorruptLine(f"malformed date: {e}") from e

    if not task.description.strip():
        raise CorruptLine("empty description")
    return task


class TaskStore:
    """
    Line-oriented text store, one task per line.

    T | 0 | <description>
    D | 1 | <description> | <yyyy-MM-dd HHmm>
    E | 0 | <description> | <start> | <end>

    save() always rewrites the whole file (temp file + os.replace).
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)
        self.skipped_lines = 0

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> list[Task]:
        """
        Read every decodable task from the store.

        A missing file (or missing directory) means "no prior data" and yields
        an empty list. Corrupt lines, including ones that are not valid UTF-8,
        are skipped one by one. Only an OSError while reading raises
        StorageReadFailure.
        """
        self.skipped_lines = 0
        if not self.exists():
            logger.info("No task store at %s, starting empty.", self._path)
            return []

        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.exception("Failed to read task store %s", self._path)
            raise StorageReadFailure() from e

        tasks: list[Task] = []
        for lineno, raw_line in enumerate(raw.splitlines(), start=1):
            if not raw_line.strip():
                continue
            try:
                tasks.append(decode_line(_decode_bytes(raw_line)))
            except CorruptLine as e:
                self.skipped_lines += 1
                logger.warning("Skipping corrupt line %d in %s: %s", lineno, self._path, e)

        logger.info(
            "Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, self.skipped_lines
        )
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) for t in tasks]
        body = "".join(line + "\n" for line in lines)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(body, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageWriteFailure() from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
