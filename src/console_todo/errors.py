"""Error kinds raised by the to-do list.

Every kind is recoverable: the command loop catches them and returns to the
menu (or, for write failures at exit, reports and terminates normally).
"""
from __future__ import annotations


class TodoError(Exception):
    """Base class for all to-do list errors."""


class InvalidDescription(TodoError, ValueError):
    """Task description is empty after trimming whitespace."""


class InvalidPosition(TodoError, IndexError):
    """A 1-based task position lies outside the current list."""

    def __init__(self, position: int, count: int):
        self.position = position
        self.count = count
        super().__init__(f"No task #{position} (list has {count} tasks).")


class MalformedInput(TodoError, ValueError):
    """Menu choice or task number is not an integer."""


class StorageReadFailure(TodoError):
    """Data file exists but does not hold a readable task collection."""


class StorageWriteFailure(TodoError):
    """Tasks could not be written to the data file."""
