"""Data models for the console to-do list.

Currently only exposes the Task dataclass. A task carries no id; its
position in the list is computed by the store whenever it is shown.
"""
from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidDescription

DONE_MARK = "X"
OPEN_MARK = " "


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Trimmed, non-empty, single-line text.
        done: Completion flag; new tasks start open.
    """
    description: str
    done: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.description, str) or not self.description.strip():
            raise InvalidDescription("Task description cannot be empty.")
        self.description = self.description.strip()

    @classmethod
    def create(cls, description: str) -> "Task":
        return cls(description)

    def mark_done(self, value: bool) -> None:
        self.done = value

    def render(self) -> str:
        mark = DONE_MARK if self.done else OPEN_MARK
        return f"[{mark}] {self.description}"

    def __str__(self) -> str:
        return self.render()
