# src/todolist/core/state.py

from __future__ import annotations

import time
from dataclasses import dataclass, field

from ..tasks.task_models import FilterMode, Task
from ..tasks.task_store import Clock
from .ports import TaskPersistencePort


@dataclass
class AppState:
    # Settings stored on the state for easy access in connectors/commands.
    settings: object
    persistence: TaskPersistencePort

    tasks: list[Task] = field(default_factory=list)
    filter_mode: FilterMode = FilterMode.ALL
    # Result of the most recent save; False after a failed write.
    last_save_ok: bool = True

    # Injectable for deterministic ids/timestamps in tests.
    clock: Clock = time.time
