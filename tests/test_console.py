# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from arts_assistant.connectors.console_connector import run_console_loop, welcome_message
from arts_assistant.core.session import Session


def _feed(monkeypatch, lines: list[str]) -> None:
    it: Iterator[str] = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_runs_until_bye(session: Session, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["todo read book", "", "list", "bye", "todo never"])

    run_console_loop(session, app_name="Arts")

    out = capsys.readouterr().out
    assert "Hello! I'm Arts, your go-to Chatbot." in out
    assert " 1. [T][ ] read book" in out
    assert " Bye! Hope to see you again soon!" in out
    assert session.should_exit is True
    assert session.tasks.size() == 1


def test_console_stops_on_eof(session: Session, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["todo a"])
    run_console_loop(session)
    assert session.tasks.size() == 1
    assert session.should_exit is False


def test_console_stops_on_ctrl_c(session: Session, monkeypatch) -> None:
    def interrupted(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    run_console_loop(session)
    assert session.tasks.is_empty()


def test_startup_notice_is_shown_before_welcome(store, monkeypatch, capsys) -> None:
    session = Session(store, startup_notice="OOPS!!! could not load")
    _feed(monkeypatch, [])

    run_console_loop(session, app_name="Arts")

    out = capsys.readouterr().out
    assert out.index("could not load") < out.index(welcome_message("Arts").splitlines()[0])


@pytest.mark.parametrize("name", ["Arts", "Pal"])
def test_welcome_message_uses_app_name(name: str) -> None:
    assert welcome_message(name).startswith(f"Hello! I'm {name},")
