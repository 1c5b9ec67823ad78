from fastapi import FastAPI, Depends, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from application.use_cases import TaskUseCases
from domain.entities import CATEGORY_OPTIONS, PRIORITY_OPTIONS, FilterCriteria
from interfaces.api import router as task_router, get_use_cases, parse_criteria
from schemas.task import format_date

# --- Basic Setup ---
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="TaskMaster")
app.include_router(task_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"LOG_LEVEL: {config.LOG_LEVEL}")
logger.info(f"CORS_ORIGINS: {config.CORS_ORIGINS}")
logger.info(f"SEED_TASKS: {config.SEED_TASKS}")

PRIORITY_COLORS = {"high": "dot-high", "medium": "dot-medium", "low": "dot-low"}
CATEGORY_COLORS = {
    "Work": "badge-work",
    "Personal": "badge-personal",
    "Health": "badge-health",
    "Shopping": "badge-shopping",
    "Other": "badge-other",
}

templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))
templates.env.filters["date_badge"] = format_date
templates.env.filters["priority_color"] = lambda priority: PRIORITY_COLORS.get(priority, "dot-unknown")
templates.env.filters["category_color"] = lambda category: CATEGORY_COLORS.get(category, CATEGORY_COLORS["Other"])


def _back_to_page(query: str) -> RedirectResponse:
    """Redirect to the page, keeping the filter query string (and nothing else)."""
    query = query.lstrip("?").split("#", 1)[0]
    url = f"/?{query}" if query else "/"
    return RedirectResponse(url=url, status_code=303)


@app.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    category: str = "All",
    priority: str = "All",
    search: str = "",
    show_completed: bool = True,
    cases: TaskUseCases = Depends(get_use_cases),
):
    """Renders the task page for the current filter selections."""
    try:
        criteria = parse_criteria(category, priority, search, show_completed)
    except ValueError as e:
        logger.warning(f"Bad filter input on page, using defaults: {e}")
        criteria = FilterCriteria()
    board = cases.board(criteria)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "board": board,
            "tasks": list(board.tasks),
            "categories": CATEGORY_OPTIONS,
            "priorities": PRIORITY_OPTIONS,
            "query": request.url.query,
        },
    )


@app.post("/tasks")
def add_task(
    text: str = Form(""),
    next_query: str = Form("", alias="next"),
    cases: TaskUseCases = Depends(get_use_cases),
):
    """Adds a task from the page form."""
    cases.create_task(text)
    return _back_to_page(next_query)


@app.post("/tasks/{task_id}/toggle")
def toggle_task(
    task_id: str,
    next_query: str = Form("", alias="next"),
    cases: TaskUseCases = Depends(get_use_cases),
):
    """Toggles the completion status of a task."""
    cases.toggle_task(task_id)
    return _back_to_page(next_query)


@app.post("/tasks/{task_id}/delete")
def delete_task(
    task_id: str,
    next_query: str = Form("", alias="next"),
    cases: TaskUseCases = Depends(get_use_cases),
):
    """Deletes a task."""
    cases.delete_task(task_id)
    return _back_to_page(next_query)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
