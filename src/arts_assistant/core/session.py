# src/arts_assistant/core/session.py

"""
The single entry point front-ends talk to: submit(text) -> reply text.

The session owns the task list and the store for the lifetime of the
process. Commands run one at a time; nothing here is thread-safe.
"""

from __future__ import annotations

import logging

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore
from .errors import ArtsError, StorageReadFailure
from .handlers import execute
from .parser import CommandKind, parse_command

logger = logging.getLogger(__name__)

ERROR_PREFIX = "OOPS!!! "
UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred: "


class Session:
    def __init__(
        self,
        store: TaskStore,
        tasks: TaskList | None = None,
        *,
        startup_notice: str | None = None,
    ) -> None:
        self.store = store
        self.tasks = tasks if tasks is not None else TaskList()
        self.startup_notice = startup_notice
        self.should_exit = False

    @classmethod
    def open(cls, store: TaskStore) -> Session:
        """Load the store; an unreadable store degrades to an empty list plus a notice."""
        try:
            return cls(store, TaskList(store.load()))
        except StorageReadFailure as e:
            logger.warning("Starting with an empty task list: %s", e)
            return cls(store, TaskList(), startup_notice=ERROR_PREFIX + e.message)

    def submit(self, text: str) -> str:
        try:
            command = parse_command(text)
            reply = execute(command, self.tasks, self.store)
        except ArtsError as e:
            logger.debug("Command failed (%s): %r", type(e).__name__, text)
            return ERROR_PREFIX + e.message
        except Exception as e:
            logger.exception("Unexpected error while handling %r", text)
            return UNEXPECTED_ERROR_PREFIX + str(e)

        if command.kind is CommandKind.BYE:
            self.should_exit = True
        return reply
