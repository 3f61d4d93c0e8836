# src/arts_assistant/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, then runs the console REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    session = create_session(settings=settings)

    run_console_loop(session, app_name=settings.app_name)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
