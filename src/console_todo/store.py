"""Task store: the ordered task list and the operations on it.

Tasks are addressed by 1-based position, recomputed from list order on
every call. Removing a task shifts every later task down by one.
"""
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidPosition, StorageReadFailure
from .models import Task
from .storage import TASKS_FILE, PathLike, Storage

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []
        # set by load_from when the file existed but could not be read
        self.load_failure: Optional[StorageReadFailure] = None

    # -------------------- queries --------------------
    def list_tasks(self) -> List[Tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self._tasks):
            raise InvalidPosition(position, len(self._tasks))
        return position - 1

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        task = Task.create(description)
        self._tasks.append(task)
        return task

    def complete(self, position: int) -> Tuple[Task, bool]:
        """Mark the task at `position` done.

        Returns the task and whether it was already done before the call.
        """
        task = self._tasks[self._index(position)]
        already_done = task.done
        task.mark_done(True)
        return task, already_done

    def remove(self, position: int) -> Task:
        return self._tasks.pop(self._index(position))

    # -------------------- persistence --------------------
    def load_from(self, path: PathLike = TASKS_FILE) -> List[Task]:
        """Replace the current tasks with those stored at `path`.

        Never raises for bad data: a corrupt or incompatible file is logged
        and treated as an empty list so the application can still start.
        The failure is kept in `load_failure` for the caller to report.
        """
        self.load_failure = None
        try:
            tasks = Storage.load_tasks(path)
        except StorageReadFailure as e:
            logger.warning("%s Starting with an empty list.", e)
            self.load_failure = e
            tasks = []
        self._tasks = tasks
        return list(tasks)

    def save_to(self, path: PathLike = TASKS_FILE) -> None:
        Storage.save_tasks(self._tasks, path)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.done)
        return f'{len(self._tasks)} tasks, {done} done'
