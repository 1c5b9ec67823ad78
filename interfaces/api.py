# interfaces/api.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

import config
from application.use_cases import TaskBoard, TaskUseCases
from domain.entities import FilterCriteria
from domain.filters import stats as compute_stats
from infrastructure.store import TaskStore, seed_tasks
from schemas.task import (
    FilterParams,
    OptionsResponse,
    StatsResponse,
    TaskCreate,
    TaskListResponse,
    TaskResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
store = TaskStore(seed_tasks() if config.SEED_TASKS else ())
use_cases = TaskUseCases(store)


def get_use_cases() -> TaskUseCases:
    return use_cases


def parse_criteria(
    category: str = "All",
    priority: str = "All",
    search: str = "",
    show_completed: bool = True,
) -> FilterCriteria:
    """Raises ValueError when the filter selections are malformed."""
    try:
        params = FilterParams(
            category=category,
            priority=priority,
            search=search,
            show_completed=show_completed,
        )
    except ValidationError as e:
        raise ValueError(e.errors(include_url=False, include_context=False)[0]["msg"]) from e
    return params.to_criteria()


def get_criteria(
    category: str = "All",
    priority: str = "All",
    search: str = "",
    show_completed: bool = True,
) -> FilterCriteria:
    try:
        return parse_criteria(category, priority, search, show_completed)
    except ValueError as e:
        logger.warning(f"Rejected filter input: {e}")
        raise HTTPException(status_code=422, detail=str(e))


def board_response(board: TaskBoard) -> TaskListResponse:
    criteria = board.criteria
    return TaskListResponse(
        tasks=[TaskResponse.from_task(task) for task in board.tasks],
        stats=StatsResponse.from_stats(board.stats),
        criteria=FilterParams(
            category=criteria.category,
            priority=criteria.priority,
            search=criteria.search,
            show_completed=criteria.show_completed,
        ),
    )


@router.get("/tasks", response_model=TaskListResponse)
def get_tasks(
    criteria: FilterCriteria = Depends(get_criteria),
    cases: TaskUseCases = Depends(get_use_cases),
):
    return board_response(cases.board(criteria))


@router.post("/tasks", response_model=TaskListResponse)
def create_task(
    task: TaskCreate,
    criteria: FilterCriteria = Depends(get_criteria),
    cases: TaskUseCases = Depends(get_use_cases),
):
    return board_response(cases.create_task(task.text, criteria))


@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskListResponse)
def toggle_task_completion(
    task_id: str,
    criteria: FilterCriteria = Depends(get_criteria),
    cases: TaskUseCases = Depends(get_use_cases),
):
    return board_response(cases.toggle_task(task_id, criteria))


@router.delete("/tasks/{task_id}", response_model=TaskListResponse)
def delete_task(
    task_id: str,
    criteria: FilterCriteria = Depends(get_criteria),
    cases: TaskUseCases = Depends(get_use_cases),
):
    return board_response(cases.delete_task(task_id, criteria))


@router.get("/stats", response_model=StatsResponse)
def get_stats(cases: TaskUseCases = Depends(get_use_cases)):
    return StatsResponse.from_stats(compute_stats(cases.get_all_tasks()))


@router.get("/options", response_model=OptionsResponse)
def get_options():
    return OptionsResponse()
