"""Persistence helpers (load/save) for the to-do list.

On-disk format is versioned JSON, one record per task:

    {"version": 1, "tasks": [{"description": "...", "done": false}, ...]}

A bare list of records (files written before the version field existed) is
read as version 1.
"""
import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import InvalidDescription, StorageReadFailure, StorageWriteFailure
from .models import Task

logger = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.json')
FORMAT_VERSION = 1

PathLike = Union[str, Path]
TaskRecord = Dict[str, Any]


class Storage:
    @staticmethod
    def load_tasks(path: PathLike = TASKS_FILE) -> List[Task]:
        """Read the task sequence stored at `path`.

        Missing file -> empty list. Anything unreadable raises
        StorageReadFailure; callers decide whether that is fatal.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No task file at %s; starting with an empty list", path)
            return []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        # ValueError covers decode errors and over-long integer literals;
        # RecursionError comes from deeply nested arrays
        except (OSError, ValueError, RecursionError) as e:
            raise StorageReadFailure(f"Cannot read {path}: {e}") from e
        tasks = Storage.decode(data)
        logger.info("Loaded %d tasks from %s", len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(tasks: List[Task], path: PathLike = TASKS_FILE) -> None:
        """Persist tasks to disk (pretty-printed), replacing any old content.

        The new content goes to a sibling temp file first and is moved over
        `path` only once fully written, so a failed save keeps the old file.
        """
        path = Path(path)
        payload = Storage.encode(tasks)
        try:
            text = json.dumps(payload, indent=4, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteFailure(f"Cannot encode tasks: {e}") from e
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'w', encoding='utf-8', dir=path.parent,
                prefix=f'.{path.name}.', suffix='.tmp', delete=False,
            ) as f:
                tmp_name = f.name
                f.write(text)
                f.write('\n')
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise StorageWriteFailure(f"Cannot write {path}: {e}") from e
        logger.info("Saved %d tasks to %s", len(tasks), path)

    # -------------------- record format --------------------
    @staticmethod
    def encode(tasks: List[Task]) -> Dict[str, Any]:
        return {
            'version': FORMAT_VERSION,
            'tasks': [{'description': t.description, 'done': t.done} for t in tasks],
        }

    @staticmethod
    def decode(data: Any) -> List[Task]:
        if isinstance(data, list):  # legacy unversioned file
            data = {'version': 1, 'tasks': data}
        if not isinstance(data, dict):
            raise StorageReadFailure("Data file does not contain a task collection.")
        version = data.get('version')
        if not isinstance(version, int) or isinstance(version, bool):
            raise StorageReadFailure(f"Missing or invalid format version: {version!r}")
        if version > FORMAT_VERSION:
            raise StorageReadFailure(
                f"Format version {version} is newer than supported ({FORMAT_VERSION})."
            )
        records = data.get('tasks')
        if not isinstance(records, list):
            raise StorageReadFailure("Data file does not contain a task list.")
        return [_record_to_task(raw, i) for i, raw in enumerate(records, start=1)]


def _record_to_task(raw: Any, number: int) -> Task:
    """Validate one stored record; any defect rejects the whole file."""
    if not isinstance(raw, dict):
        raise StorageReadFailure(f"Record {number} is not an object.")
    done = raw.get('done')
    if not isinstance(done, bool):
        raise StorageReadFailure(f"Record {number} has no boolean 'done' field.")
    try:
        return Task(raw.get('description'), done=done)
    except InvalidDescription as e:
        raise StorageReadFailure(f"Record {number}: {e}") from e
