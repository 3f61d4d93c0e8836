# src/arts_assistant/core/parser.py

"""
Command grammar.

"<keyword> <remainder>": the keyword is the first whitespace-delimited token
(case-insensitive), the remainder is everything after it, stripped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_list import TaskList
from .errors import InvalidTaskIndex, UnknownCommand


class CommandKind(StrEnum):
    BYE = "bye"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIND = "find"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    remainder: str = ""


def parse_command(text: str) -> Command:
    parts = text.strip().split(maxsplit=1)
    if not parts:
        raise UnknownCommand()

    keyword = parts[0].lower()
    try:
        kind = CommandKind(keyword)
    except ValueError:
        raise UnknownCommand() from None

    remainder = parts[1].strip() if len(parts) > 1 else ""
    return Command(kind=kind, remainder=remainder)


def parse_task_index(raw: str, tasks: TaskList) -> int:
    """
    Convert a 1-based user index into a checked 0-based one.

    Non-numeric input and out-of-range numbers both raise InvalidTaskIndex.
    """
    digits = raw.strip()
    # int() would also take "+1", "1_0" and non-ASCII digits.
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidTaskIndex()

    index = int(digits) - 1
    if not 0 <= index < tasks.size():
        raise InvalidTaskIndex()
    return index
