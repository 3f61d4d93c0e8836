# src/arts_assistant/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the composition root: it takes settings, makes sure the local
data directory exists and wires a TaskStore into a Session.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.session import Session
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_session(*, settings=None) -> Session:
    """
    Build a Session from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    session = Session.open(TaskStore(settings.tasks_path))
    logger.info("Session ready tasks=%d store=%s", session.tasks.size(), settings.tasks_path)
    return session
