# src/todolist/tasks/task_models.py

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


class FilterMode(StrEnum):
    """
    Which subset of the task list is shown.

    Notes:
    - the value is what the console accepts and what settings store
    - "done", "open" and "todo" are accepted as aliases on input only
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode:
        key = (raw or "").strip().lower()
        key = _FILTER_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown filter mode: {raw!r}") from None


_FILTER_ALIASES = {
    "done": "completed",
    "open": "active",
    "todo": "active",
}


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool
    # ISO-8601 string, display only
    created_at: str


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    active: int
    completed: int

    @property
    def percent_completed(self) -> int:
        if not self.total:
            return 0
        # halves round up: 12.5 -> 13
        return math.floor(self.completed * 100 / self.total + 0.5)
