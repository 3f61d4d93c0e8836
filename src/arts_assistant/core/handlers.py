# src/arts_assistant/core/handlers.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.dates import parse_datetime
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo
from ..tasks.task_store import TaskStore
from .errors import (
    EmptyDescription,
    MissingDeadlineMarker,
    MissingEventMarkers,
    MultilineDescription,
)
from .parser import Command, CommandKind, parse_task_index

Handler = Callable[[str, TaskList, TaskStore], str]

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Bye! Hope to see you again soon!"
NO_TASKS_MESSAGE = "No tasks yet! Why not add some?"
TASK_LIST_HEADER = "Here are the tasks in your list:"
MATCHES_HEADER = "Here are the matching tasks in your list:"
NO_MATCHES_MESSAGE = "No matching tasks found."

BY_MARKER = " /by "
FROM_MARKER = " /from "
TO_MARKER = " /to "


def _count_phrase(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


def _numbered(entries: list[tuple[int, Task]]) -> str:
    return "\n".join(f"{i + 1}. {task}" for i, task in entries)


def _checked_description(raw: str, kind_name: str) -> str:
    description = raw.strip()
    if not description:
        raise EmptyDescription.for_kind(kind_name)
    # One task per store line.
    if "\n" in description or "\r" in description:
        raise MultilineDescription()
    return description


def _add_and_save(task: Task, tasks: TaskList, store: TaskStore) -> str:
    tasks.add_task(task)
    store.save(tasks.get_tasks())
    logger.debug("Added %s task (total=%d)", task.kind.name.lower(), tasks.size())
    return (
        "Got it. I've added this task:\n"
        f" {task}\n"
        f"Now you have {_count_phrase(tasks.size())} in the list."
    )


def cmd_bye(args: str, tasks: TaskList, store: TaskStore) -> str:
    return GOODBYE_MESSAGE


def cmd_list(args: str, tasks: TaskList, store: TaskStore) -> str:
    if tasks.is_empty():
        return NO_TASKS_MESSAGE
    return TASK_LIST_HEADER + "\n" + _numbered(list(enumerate(tasks)))


def cmd_todo(args: str, tasks: TaskList, store: TaskStore) -> str:
    description = _checked_description(args, "todo")
    return _add_and_save(Todo(description), tasks, store)


def cmd_deadline(args: str, tasks: TaskList, store: TaskStore) -> str:
    """
    deadline <description> /by <date>

    Text after the first " /by " is the date.
    """
    # Pad so "deadline /by ..." is reported as an empty description.
    description, sep, due_raw = (" " + args).partition(BY_MARKER)
    if not sep:
        raise MissingDeadlineMarker()
    description = _checked_description(description, "deadline")

    due_at = parse_datetime(due_raw)
    return _add_and_save(Deadline(description, due_at), tasks, store)


def cmd_event(args: str, tasks: TaskList, store: TaskStore) -> str:
    """
    event <description> /from <start> /to <end>

    The markers must appear in that order. An end before the start is accepted.
    """
    description, sep_from, rest = (" " + args).partition(FROM_MARKER)
    start_raw, sep_to, end_raw = rest.partition(TO_MARKER)
    if not sep_from or not sep_to:
        raise MissingEventMarkers()
    description = _checked_description(description, "event")

    start_at = parse_datetime(start_raw)
    end_at = parse_datetime(end_raw)
    return _add_and_save(Event(description, start_at, end_at), tasks, store)


def cmd_mark(args: str, tasks: TaskList, store: TaskStore) -> str:
    task = tasks.get_task(parse_task_index(args, tasks))
    task.mark_done()
    store.save(tasks.get_tasks())
    return f"Nice! I've marked this task as done:\n {task}"


def cmd_unmark(args: str, tasks: TaskList, store: TaskStore) -> str:
    task = tasks.get_task(parse_task_index(args, tasks))
    task.mark_not_done()
    store.save(tasks.get_tasks())
    return f"OK, I've marked this task as not done yet:\n {task}"


def cmd_delete(args: str, tasks: TaskList, store: TaskStore) -> str:
    removed = tasks.remove_task(parse_task_index(args, tasks))
    store.save(tasks.get_tasks())
    return (
        "Noted. I've removed this task:\n"
        f" {removed}\n"
        f"Now you have {_count_phrase(tasks.size())} in the list."
    )


def cmd_find(args: str, tasks: TaskList, store: TaskStore) -> str:
    keyword = args.strip()
    if not keyword:
        raise EmptyDescription("The search keyword cannot be empty.")
    matches = tasks.find(keyword)
    if not matches:
        return NO_MATCHES_MESSAGE
    return MATCHES_HEADER + "\n" + _numbered(matches)


HANDLERS: dict[CommandKind, Handler] = {
    CommandKind.BYE: cmd_bye,
    CommandKind.LIST: cmd_list,
    CommandKind.MARK: cmd_mark,
    CommandKind.UNMARK: cmd_unmark,
    CommandKind.DELETE: cmd_delete,
    CommandKind.TODO: cmd_todo,
    CommandKind.DEADLINE: cmd_deadline,
    CommandKind.EVENT: cmd_event,
    CommandKind.FIND: cmd_find,
}


def execute(command: Command, tasks: TaskList, store: TaskStore) -> str:
    return HANDLERS[command.kind](command.remainder, tasks, store)
