# tests/test_task_list.py

from __future__ import annotations

import pytest

from arts_assistant.core.errors import IndexOutOfRange, InvalidTaskIndex
from arts_assistant.tasks.task_list import TaskList
from arts_assistant.tasks.task_models import Todo


def _list(*descriptions: str) -> TaskList:
    return TaskList(Todo(d) for d in descriptions)


def test_add_get_size_and_empty() -> None:
    tasks = TaskList()
    assert tasks.is_empty()
    assert tasks.size() == 0

    tasks.add_task(Todo("a"))
    tasks.add_task(Todo("b"))
    assert not tasks.is_empty()
    assert tasks.size() == 2
    assert tasks.get_task(1).description == "b"


def test_remove_shifts_later_tasks_down() -> None:
    tasks = _list("a", "b", "c")
    removed = tasks.remove_task(1)
    assert removed.description == "b"
    assert [t.description for t in tasks] == ["a", "c"]
    assert tasks.get_task(1).description == "c"


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_indices_raise_without_mutation(index: int) -> None:
    tasks = _list("a", "b", "c")
    with pytest.raises(IndexOutOfRange):
        tasks.get_task(index)
    with pytest.raises(InvalidTaskIndex):
        tasks.remove_task(index)
    assert tasks.size() == 3


def test_find_keeps_original_indices_and_order() -> None:
    tasks = _list("buy milk", "read book", "buy eggs")
    matches = tasks.find("buy")
    assert [(i, t.description) for i, t in matches] == [(0, "buy milk"), (2, "buy eggs")]


def test_find_is_case_sensitive_and_read_only() -> None:
    tasks = _list("Buy milk", "buy eggs")
    assert [i for i, _ in tasks.find("buy")] == [1]
    assert tasks.find("nothing") == []
    assert tasks.size() == 2


def test_get_tasks_returns_a_copy() -> None:
    tasks = _list("a")
    snapshot = tasks.get_tasks()
    snapshot.append(Todo("b"))
    assert tasks.size() == 1
