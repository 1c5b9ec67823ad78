# tests/conftest.py

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from domain.entities import Priority, Task
from infrastructure.store import TaskStore
from interfaces.api import get_use_cases
from main import app


@pytest.fixture()
def sample_tasks() -> tuple:
    """Three tasks in display order: open/Work/high, done/Personal/medium, open/Health/medium."""
    created = datetime(2025, 7, 17, 15, 0, 0)
    return (
        Task(id="1", text="Complete project proposal", priority=Priority.HIGH, category="Work", created_at=created),
        Task(id="2", text="Buy groceries", completed=True, category="Personal", created_at=created),
        Task(id="3", text="Morning workout", category="Health", created_at=created),
    )


@pytest.fixture()
def store(sample_tasks) -> TaskStore:
    return TaskStore(sample_tasks)


@pytest.fixture()
def use_cases(store: TaskStore) -> TaskUseCases:
    return TaskUseCases(store)


@pytest.fixture()
def client(use_cases: TaskUseCases):
    """TestClient wired to a fresh store per test instead of the module-level one."""
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
