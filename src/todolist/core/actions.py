# src/todolist/core/actions.py

"""
User actions against AppState.

Each mutating action swaps state.tasks for the list returned by task_store and
then calls persist(state). Persisting is done here, by the caller, so
task_store itself stays free of side effects.
"""

from __future__ import annotations

import logging

from ..tasks import task_store
from ..tasks.task_models import FilterMode, Task, TaskStats
from .state import AppState

logger = logging.getLogger(__name__)


def persist(state: AppState) -> bool:
    """Post-mutation hook: write the full list to the durable slot."""
    state.last_save_ok = state.persistence.save(state.tasks)
    return state.last_save_ok


def submit_task(state: AppState, text: str) -> Task | None:
    """Append a task. Returns the new task, or None when text is blank."""
    before = len(state.tasks)
    state.tasks = task_store.add_task(state.tasks, text, clock=state.clock)
    persist(state)

    if len(state.tasks) == before:
        return None
    task = state.tasks[-1]
    logger.info("Task created id=%s", task.id)
    return task


def toggle(state: AppState, task_id: int) -> Task | None:
    """Flip completion. Returns the task as it was before, or None if unknown."""
    found = task_store.find_task(state.tasks, task_id)
    state.tasks = task_store.toggle_task(state.tasks, task_id)
    persist(state)

    if found is None:
        logger.debug("Toggle ignored, no task id=%s", task_id)
    else:
        logger.info("Task toggled id=%s completed=%s", task_id, not found.completed)
    return found


def delete(state: AppState, task_id: int) -> Task | None:
    """Remove a task. Returns the removed task, or None if unknown."""
    found = task_store.find_task(state.tasks, task_id)
    state.tasks = task_store.remove_task(state.tasks, task_id)
    persist(state)

    if found is None:
        logger.debug("Delete ignored, no task id=%s", task_id)
    else:
        logger.info("Task deleted id=%s", task_id)
    return found


def set_filter(state: AppState, mode: FilterMode | str) -> FilterMode:
    """Change the session filter (not persisted). Raises ValueError on unknown modes."""
    state.filter_mode = mode if isinstance(mode, FilterMode) else FilterMode.parse(mode)
    return state.filter_mode


def visible_tasks(state: AppState) -> list[Task]:
    return task_store.filter_tasks(state.tasks, state.filter_mode)


def current_stats(state: AppState) -> TaskStats:
    return task_store.task_stats(state.tasks)
