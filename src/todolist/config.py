# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default; nothing is required.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .tasks.task_models import FilterMode

ENV_PREFIX = "TODO"

_DEFAULT_STORAGE_FILES = {
    "json": "storage.json",
    "sqlite": "storage.sqlite3",
}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str

    # ---- Presentation ----
    default_filter: FilterMode

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "todolist").strip() or "todolist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todolist"))
        storage_backend = _env(_k("STORAGE_BACKEND"), "json").strip().lower() or "json"
        default_file = _DEFAULT_STORAGE_FILES.get(storage_backend, "storage.json")
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / default_file)
        storage_key = _env(_k("STORAGE_KEY"), "todos").strip() or "todos"

        try:
            default_filter = FilterMode.parse(_env(_k("DEFAULT_FILTER"), "all"))
        except ValueError:
            default_filter = FilterMode.ALL

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            default_filter=default_filter,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
