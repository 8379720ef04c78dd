# src/todolist/tasks/task_store.py

"""
Task list operations.

Every function takes the current list and returns a new one; the input list is
never modified. Nothing here touches storage: callers persist the result.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import UTC, datetime

from .task_models import FilterMode, Task, TaskStats

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def utc_timestamp(now: float) -> str:
    """Epoch seconds -> '2024-05-01T12:00:00.000Z'."""
    dt = datetime.fromtimestamp(now, tz=UTC)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_task_id(tasks: Sequence[Task], now_ms: int) -> int:
    """
    Millisecond clock value, bumped past the largest existing id when needed
    (two adds within the same millisecond, clock going backwards).
    """
    if not tasks:
        return now_ms
    highest = max(t.id for t in tasks)
    return now_ms if now_ms > highest else highest + 1


def add_task(tasks: list[Task], text: str, *, clock: Clock = time.time) -> list[Task]:
    clean = (text or "").strip()
    if not clean:
        return tasks

    now = clock()
    task = Task(
        id=next_task_id(tasks, int(now * 1000)),
        text=clean,
        completed=False,
        created_at=utc_timestamp(now),
    )
    logger.debug("Task added id=%s", task.id)
    return [*tasks, task]


def toggle_task(tasks: list[Task], task_id: int) -> list[Task]:
    return [replace(t, completed=not t.completed) if t.id == task_id else t for t in tasks]


def remove_task(tasks: list[Task], task_id: int) -> list[Task]:
    return [t for t in tasks if t.id != task_id]


def filter_tasks(tasks: Sequence[Task], mode: FilterMode | str) -> list[Task]:
    """
    Derived view for display. Unrecognized modes fall through to "all".
    """
    if mode == FilterMode.ACTIVE:
        return [t for t in tasks if not t.completed]
    if mode == FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def task_stats(tasks: Sequence[Task]) -> TaskStats:
    completed = sum(1 for t in tasks if t.completed)
    return TaskStats(total=len(tasks), active=len(tasks) - completed, completed=completed)


def find_task(tasks: Sequence[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None
