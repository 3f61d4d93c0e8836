# src/arts_assistant/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.session import Session

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def welcome_message(app_name: str) -> str:
    return f"Hello! I'm {app_name}, your go-to Chatbot.\nWhat can I do for you today?"


def _print_block(text: str) -> None:
    print(DIVIDER)
    for line in text.splitlines():
        print(f" {line}")
    print(DIVIDER)


def run_console_loop(session: Session, *, app_name: str = "Arts") -> None:
    logger.info("Console connector started.")

    if session.startup_notice:
        _print_block(session.startup_notice)
    _print_block(welcome_message(app_name))

    while not session.should_exit:
        try:
            user_input = input().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        _print_block(session.submit(user_input))

    logger.info("Console connector finished.")
