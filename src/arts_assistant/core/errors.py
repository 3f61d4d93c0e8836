# src/arts_assistant/core/errors.py

"""
User-facing error taxonomy.

Every error carries the message that ends up in the reply text; the session
prefixes it with "OOPS!!! " instead of letting it escape to the front-end.
"""

from __future__ import annotations


class ArtsError(Exception):
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class UnknownCommand(ArtsError):
    default_message = "I'm sorry, but I don't know what that means."


class EmptyDescription(ArtsError):
    default_message = "The description of a todo cannot be empty."

    @classmethod
    def for_kind(cls, kind_name: str) -> EmptyDescription:
        return cls(f"The description of a {kind_name} cannot be empty.")


class MultilineDescription(ArtsError):
    default_message = "A task description must fit on one line."


class MissingDeadlineMarker(ArtsError):
    default_message = "The deadline must have a /by date."


class MissingEventMarkers(ArtsError):
    default_message = "The event must have /from and /to times."


class InvalidDateFormat(ArtsError):
    default_message = "Invalid date format. Please use yyyy-MM-dd HHmm or d/M/yyyy HHmm."


class InvalidTaskIndex(ArtsError):
    default_message = "Invalid task index."


class IndexOutOfRange(InvalidTaskIndex):
    """Raised by TaskList for a 0-based index outside 0..size-1."""


class StorageWriteFailure(ArtsError):
    default_message = (
        "I couldn't save your tasks to disk. The change is kept for this session only."
    )


class StorageReadFailure(ArtsError):
    default_message = "I couldn't load your saved tasks, starting with an empty list."
