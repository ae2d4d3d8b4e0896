"""Todo list use cases (add, list, delete, complete)."""

from __future__ import annotations

import logging
from typing import Optional

from edu.core.config import get_settings
from edu.core.ids import new_task_id
from edu.domain.models import Task
from edu.repositories.json_storage import RecordStore

logger = logging.getLogger(__name__)


class TaskError(Exception):
    """Base exception for todo workflow."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message


class DuplicateTaskError(TaskError):
    """Raised when adding a task whose name is already stored."""

    def __init__(self, name: str):
        super().__init__(name, "Task already exists")


class TaskNotFoundError(TaskError):
    """Raised when deleting/completing a task that is not stored."""

    def __init__(self, name: str):
        super().__init__(name, f"Task {name} does not exist")


class TaskService:
    """Each call is one load, scan/mutate, save cycle over the task store."""

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        if store is None:
            settings = get_settings()
            store = RecordStore(settings.tasks_file, indent=settings.json_indent)
        self.store = store

    def _load(self) -> list[Task]:
        return self.store.load_models(Task)

    def add(self, name: str) -> Task:
        tasks = self._load()
        if any(t.task == name for t in tasks):
            raise DuplicateTaskError(name)
        task = Task(id=new_task_id(t.id for t in tasks), task=name, completed=False)
        tasks.append(task)
        self.store.save_models(tasks)
        logger.info("added task %r (id=%d)", name, task.id)
        return task

    def list(self) -> list[Task]:
        return self._load()

    def delete(self, name: str) -> int:
        tasks = self._load()
        remaining = [t for t in tasks if t.task != name]
        removed = len(tasks) - len(remaining)
        if not removed:
            raise TaskNotFoundError(name)
        self.store.save_models(remaining)
        logger.info("deleted %d task(s) named %r", removed, name)
        return removed

    def complete(self, name: str) -> int:
        tasks = self._load()
        matches = [t for t in tasks if t.task == name]
        if not matches:
            raise TaskNotFoundError(name)
        for task in matches:
            task.completed = True
        self.store.save_models(tasks)
        logger.info("completed %d task(s) named %r", len(matches), name)
        return len(matches)
