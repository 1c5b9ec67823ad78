
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_CATEGORY = "Personal"
ALL = "All"

CATEGORY_OPTIONS = [ALL, "Work", "Personal", "Health", "Shopping", "Other"]
PRIORITY_OPTIONS = [ALL, "Low", "Medium", "High"]


@dataclass(frozen=True)
class Task:
    id: str
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: str = DEFAULT_CATEGORY
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class FilterCriteria:
    """Current filter selections. Every field is always present."""
    category: str = ALL
    priority: str = ALL
    search: str = ""
    show_completed: bool = True


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int

    @property
    def remaining(self) -> int:
        return self.total - self.completed
