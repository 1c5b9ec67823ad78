from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator

from domain.entities import ALL, PRIORITY_OPTIONS, CATEGORY_OPTIONS, FilterCriteria, Task, TaskStats

DATE_FORMAT = "%b %d, %Y"


def format_date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


class TaskCreate(BaseModel):
    text: str


class TaskResponse(BaseModel):
    id: str
    text: str
    completed: bool
    priority: str
    category: str
    created_at: str

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            text=task.text,
            completed=task.completed,
            priority=task.priority.value,
            category=task.category,
            created_at=format_date(task.created_at),
        )


class StatsResponse(BaseModel):
    total: int
    completed: int
    remaining: int

    @classmethod
    def from_stats(cls, stats: TaskStats) -> "StatsResponse":
        return cls(total=stats.total, completed=stats.completed, remaining=stats.remaining)


class FilterParams(BaseModel):
    category: str = ALL
    priority: str = ALL
    search: str = ""
    show_completed: bool = True

    @field_validator("priority")
    @classmethod
    def check_priority(cls, value: str) -> str:
        # accept any casing, normalize to the selector label
        for option in PRIORITY_OPTIONS:
            if option.lower() == value.strip().lower():
                return option
        raise ValueError(f"priority must be one of {', '.join(PRIORITY_OPTIONS)}")

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            category=self.category,
            priority=self.priority,
            search=self.search,
            show_completed=self.show_completed,
        )


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]
    stats: StatsResponse
    criteria: FilterParams


class OptionsResponse(BaseModel):
    categories: List[str] = CATEGORY_OPTIONS
    priorities: List[str] = PRIORITY_OPTIONS
