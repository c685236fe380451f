# tests/test_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from console_todo.errors import InvalidDescription, InvalidPosition
from console_todo.models import Task
from console_todo.storage import Storage
from console_todo.store import TaskStore


def descriptions(store: TaskStore) -> list[tuple[int, str]]:
    return [(pos, t.description) for pos, t in store.list_tasks()]


def test_empty_store_lists_nothing() -> None:
    s = TaskStore()
    assert s.list_tasks() == []
    assert len(s) == 0


def test_add_returns_task_and_keeps_order(store: TaskStore) -> None:
    task = store.add("  D  ")
    assert task.description == "D"
    assert descriptions(store) == [(1, "A"), (2, "B"), (3, "C"), (4, "D")]


def test_add_rejects_blank_without_appending(store: TaskStore) -> None:
    with pytest.raises(InvalidDescription):
        store.add("   ")
    assert len(store) == 3


def test_complete_is_idempotent(store: TaskStore) -> None:
    task, already = store.complete(2)
    assert task.description == "B"
    assert already is False
    task, already = store.complete(2)
    assert already is True
    assert task.done is True
    assert [t.done for t in store] == [False, True, False]


def test_remove_shifts_later_positions(store: TaskStore) -> None:
    removed = store.remove(2)
    assert removed.description == "B"
    assert descriptions(store) == [(1, "A"), (2, "C")]
    assert len(store) == 2


@pytest.mark.parametrize("position", [0, -1, 4, 100])
def test_out_of_range_positions(store: TaskStore, position: int) -> None:
    with pytest.raises(InvalidPosition) as exc:
        store.complete(position)
    assert exc.value.position == position
    assert exc.value.count == 3
    with pytest.raises(InvalidPosition):
        store.remove(position)
    assert len(store) == 3
    assert not any(t.done for t in store)


def test_remove_from_empty_store() -> None:
    with pytest.raises(InvalidPosition):
        TaskStore().remove(1)


def test_summary(store: TaskStore) -> None:
    store.complete(1)
    assert str(store) == "3 tasks, 1 done"


def test_round_trip_after_mutations(store: TaskStore, data_file: Path) -> None:
    store.complete(1)
    store.add("D")
    store.remove(2)
    store.complete(3)
    store.save_to(data_file)

    reloaded = TaskStore()
    loaded = reloaded.load_from(data_file)
    assert loaded == list(store)
    assert loaded == [Task("A", done=True), Task("C"), Task("D", done=True)]


def test_load_from_missing_file_is_empty(data_file: Path) -> None:
    s = TaskStore([Task("stale")])
    assert s.load_from(data_file) == []
    assert len(s) == 0


def test_load_from_corrupt_file_logs_and_starts_empty(data_file: Path, caplog) -> None:
    data_file.write_text("{not json", encoding="utf-8")
    s = TaskStore()
    with caplog.at_level("WARNING", logger="console_todo"):
        assert s.load_from(data_file) == []
    assert "Starting with an empty list" in caplog.text
    assert len(s) == 0
    assert s.load_failure is not None


def test_load_failure_cleared_by_next_good_load(data_file: Path) -> None:
    data_file.write_text("{not json", encoding="utf-8")
    s = TaskStore()
    s.load_from(data_file)
    assert s.load_failure is not None

    Storage.save_tasks([Task("A")], data_file)
    assert s.load_from(data_file) == [Task("A")]
    assert s.load_failure is None


def test_missing_file_is_not_a_load_failure(data_file: Path) -> None:
    s = TaskStore()
    s.load_from(data_file)
    assert s.load_failure is None


def test_buy_milk_lifecycle(data_file: Path) -> None:
    s = TaskStore()
    assert s.load_from(data_file) == []

    assert s.add("Buy milk").description == "Buy milk"
    assert [f"{p}. {t.render()}" for p, t in s.list_tasks()] == ["1. [ ] Buy milk"]

    _, already = s.complete(1)
    assert already is False
    assert [f"{p}. {t.render()}" for p, t in s.list_tasks()] == ["1. [X] Buy milk"]

    assert s.remove(1).description == "Buy milk"
    assert s.list_tasks() == []

    s.save_to(data_file)
    assert TaskStore().load_from(data_file) == []
