import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Tuple

from domain.entities import Priority, Task

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def seed_tasks() -> Tuple[Task, ...]:
    now = datetime.now()
    return (
        Task(id=_new_id(), text="Complete project proposal", priority=Priority.HIGH, category="Work", created_at=now),
        Task(id=_new_id(), text="Buy groceries", completed=True, category="Personal", created_at=now),
        Task(id=_new_id(), text="Morning workout", category="Health", created_at=now),
    )


class TaskStore:
    """In-memory, ordered task collection (most recent first).

    Each mutation swaps in a new tuple. Tasks that are not targeted stay the
    very same objects, so callers can detect changes with ``is``.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: Tuple[Task, ...] = tuple(tasks or ())
        ids = [task.id for task in self._tasks]
        if len(ids) != len(set(ids)):
            raise ValueError("task ids must be unique")

    def all(self) -> Tuple[Task, ...]:
        return self._tasks

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, text: str) -> Optional[Task]:
        if not text or not text.strip():
            logger.debug("Ignoring add with empty text")
            return None
        task = Task(id=_new_id(), text=text)
        self._tasks = (task,) + self._tasks
        logger.info(f"Added task {task.id}")
        return task

    def toggle(self, task_id: str) -> Optional[Task]:
        toggled: Optional[Task] = None
        updated = []
        for task in self._tasks:
            if toggled is None and task.id == task_id:
                toggled = replace(task, completed=not task.completed)
                updated.append(toggled)
            else:
                updated.append(task)
        if toggled is None:
            logger.debug(f"Toggle ignored, no task {task_id}")
            return None
        self._tasks = tuple(updated)
        logger.info(f"Task {task_id} toggled to completed = {toggled.completed}")
        return toggled

    def delete(self, task_id: str) -> bool:
        remaining = tuple(task for task in self._tasks if task.id != task_id)
        if len(remaining) == len(self._tasks):
            logger.debug(f"Delete ignored, no task {task_id}")
            return False
        self._tasks = remaining
        logger.info(f"Deleted task {task_id}")
        return True

    def __len__(self) -> int:
        return len(self._tasks)
