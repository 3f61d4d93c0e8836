# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from arts_assistant.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("ARTS_APP_NAME", "ARTS_LOG_LEVEL", "ARTS_DATA_DIR", "ARTS_TASKS_PATH", "ARTS_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "Arts"
    assert s.log_level == "WARNING"
    assert s.tasks_path == Path("data") / "tasks.txt"
    assert s.log_dir == Path("data")


def test_paths_follow_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ARTS_DATA_DIR", str(tmp_path / "store"))
    monkeypatch.delenv("ARTS_TASKS_PATH", raising=False)
    monkeypatch.setenv("ARTS_LOG_DIR", "   ")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "store" / "tasks.txt"
    assert s.log_dir == tmp_path / "store"


def test_explicit_tasks_path_wins(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ARTS_TASKS_PATH", str(tmp_path / "mine.txt"))
    monkeypatch.setenv("ARTS_APP_NAME", "Pal")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "mine.txt"
    assert s.app_name == "Pal"
