# src/todolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the storage backend and TaskPersistence into AppState,
- hydrates the task list from the durable slot.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..storage.backends import open_storage
from ..storage.persistence import TaskPersistence

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings and load the stored tasks.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = open_storage(settings)
    persistence = TaskPersistence(storage, key=settings.storage_key)

    state = AppState(
        settings=settings,
        persistence=persistence,
        tasks=persistence.load(),
        filter_mode=settings.default_filter,
    )
    logger.info(
        "State ready backend=%s path=%s tasks=%d",
        settings.storage_backend,
        settings.storage_path,
        len(state.tasks),
    )
    return state
