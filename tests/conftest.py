# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from console_todo.store import TaskStore


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store() -> TaskStore:
    """Store holding A, B, C in that order, all open."""
    s = TaskStore()
    for description in ("A", "B", "C"):
        s.add(description)
    return s
