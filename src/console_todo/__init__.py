"""Console to-do list: add, complete and remove tasks kept in a JSON file."""
from .errors import (
    InvalidDescription,
    InvalidPosition,
    MalformedInput,
    StorageReadFailure,
    StorageWriteFailure,
    TodoError,
)
from .models import Task
from .store import TaskStore

__version__ = "1.0.0"

__all__ = [
    "InvalidDescription",
    "InvalidPosition",
    "MalformedInput",
    "StorageReadFailure",
    "StorageWriteFailure",
    "Task",
    "TaskStore",
    "TodoError",
]
