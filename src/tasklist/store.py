#!/usr/bin/env python3
"""
JSON persistence for the task list.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterator, List, Optional

from .models import Task, task_from_dict, task_to_dict


TASKLIST_PATH_ENV = "TASKLIST_PATH"
DEFAULT_TASKLIST_FILE = "tasklist.json"


class TaskStoreError(ValueError):
    """
    Raised when the task list file cannot be parsed.
    """


def tasklist_path() -> Path:
    """
    Resolve the on-disk task list file.

    Returns
    -------
    Path
        ``$TASKLIST_PATH`` when set, else ``tasklist.json`` in the
        working directory.
    """
    override = os.environ.get(TASKLIST_PATH_ENV)
    if override:
        return Path(os.path.expandvars(os.path.expanduser(override)))
    return Path(DEFAULT_TASKLIST_FILE)


class TaskStore:
    """
    Ordered, in-memory task list with explicit load and save.

    Parameters
    ----------
    path : Optional[Path], optional
        Override file path (default: resolved by ``tasklist_path``).
    """

    def __init__(self, path: Optional[Path] = None):
        self.path: Path = path or tasklist_path()
        self.tasks: List[Task] = []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def load(self) -> None:
        """
        Replace the in-memory list with the file contents.

        A missing file leaves the list empty.

        Raises
        ------
        TaskStoreError
            If the file is not a JSON array of task objects.
        """
        if not self.path.exists():
            self.tasks = []
            return
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise TaskStoreError(f"{self.path}: not UTF-8: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise TaskStoreError(f"{self.path}: invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise TaskStoreError(f"{self.path}: expected a JSON array of tasks")
        tasks: List[Task] = []
        for index, item in enumerate(data, start=1):
            try:
                tasks.append(task_from_dict(item))
            except ValueError as exc:
                raise TaskStoreError(f"{self.path}: entry {index}: {exc}") from exc
        self.tasks = tasks

    def save(self) -> None:
        """
        Overwrite the file with the full task list.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [task_to_dict(task) for task in self.tasks]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def add(self, task: Task) -> None:
        self.tasks.append(task)

    def get(self, position: int) -> Task:
        """
        Return the task at a 1-based position.

        Raises
        ------
        IndexError
            If the position is outside ``1..len(store)``.
        """
        if not 1 <= position <= len(self.tasks):
            raise IndexError(f"task position out of range: {position}")
        return self.tasks[position - 1]

    def remove(self, position: int) -> Task:
        """
        Remove and return the task at a 1-based position.
        """
        task = self.get(position)
        del self.tasks[position - 1]
        return task
