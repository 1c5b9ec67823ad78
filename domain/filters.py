"""Derived views over the task collection.

Everything here is a pure function of its inputs: the same tasks and the
same criteria always give the same visible tasks, in source order.
"""
from typing import Iterator, Sequence

from domain.entities import ALL, FilterCriteria, Task, TaskStats


def matches_category(task: Task, category: str) -> bool:
    return category == ALL or task.category == category


def matches_priority(task: Task, priority: str) -> bool:
    # selector labels are capitalized ("High"), stored values are not
    return priority == ALL or task.priority.value == priority.lower()


def matches_search(task: Task, search: str) -> bool:
    return not search or search.lower() in task.text.lower()


def matches_visibility(task: Task, show_completed: bool) -> bool:
    return show_completed or not task.completed


def is_visible(task: Task, criteria: FilterCriteria) -> bool:
    return (
        matches_category(task, criteria.category)
        and matches_priority(task, criteria.priority)
        and matches_search(task, criteria.search)
        and matches_visibility(task, criteria.show_completed)
    )


class VisibleTasks:
    """Lazy, restartable view of the tasks that pass ``criteria``.

    Nothing is filtered until the view is iterated, and each iteration
    scans the source again, so the view can be walked any number of times.
    """

    def __init__(self, tasks: Sequence[Task], criteria: FilterCriteria):
        self.tasks = tasks
        self.criteria = criteria

    def __iter__(self) -> Iterator[Task]:
        return (task for task in self.tasks if is_visible(task, self.criteria))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"VisibleTasks(criteria={self.criteria!r}, source={len(self.tasks)})"


def visible(tasks: Sequence[Task], criteria: FilterCriteria) -> VisibleTasks:
    return VisibleTasks(tasks, criteria)


def stats(tasks: Sequence[Task]) -> TaskStats:
    """Counters over the whole collection, independent of any filter."""
    completed = sum(1 for task in tasks if task.completed)
    return TaskStats(total=len(tasks), completed=completed)
