from dataclasses import dataclass
from typing import Optional, Tuple

from domain.entities import FilterCriteria, Task, TaskStats
from domain.filters import VisibleTasks, stats, visible
from infrastructure.store import TaskStore


@dataclass(frozen=True)
class TaskBoard:
    """What the UI renders: the visible tasks plus the counters."""
    tasks: VisibleTasks
    stats: TaskStats
    criteria: FilterCriteria


class TaskUseCases:
    """Every mutation is followed by a fresh board for the caller's criteria."""

    def __init__(self, store: TaskStore):
        self.store = store

    def board(self, criteria: Optional[FilterCriteria] = None) -> TaskBoard:
        criteria = criteria or FilterCriteria()
        tasks = self.store.all()
        return TaskBoard(tasks=visible(tasks, criteria), stats=stats(tasks), criteria=criteria)

    def get_all_tasks(self) -> Tuple[Task, ...]:
        return self.store.all()

    def create_task(self, text: str, criteria: Optional[FilterCriteria] = None) -> TaskBoard:
        self.store.add(text)
        return self.board(criteria)

    def toggle_task(self, task_id: str, criteria: Optional[FilterCriteria] = None) -> TaskBoard:
        self.store.toggle(task_id)
        return self.board(criteria)

    def delete_task(self, task_id: str, criteria: Optional[FilterCriteria] = None) -> TaskBoard:
        self.store.delete(task_id)
        return self.board(criteria)
