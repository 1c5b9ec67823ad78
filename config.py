import os
from pathlib import Path
from typing import Optional


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

LOG_LEVEL = os.getenv("TASKMASTER_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("TASKMASTER_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
SEED_TASKS = _truthy_env(os.getenv("TASKMASTER_SEED_TASKS"), True)
HOST = os.getenv("TASKMASTER_HOST", "127.0.0.1")
PORT = int(os.getenv("TASKMASTER_PORT", "8000"))
