# src/todolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and lets tests inject in-memory fakes.
"""

from typing import Protocol

from ..tasks.task_models import Task


class KeyValueStorage(Protocol):
    """
    A durable string -> string slot store (browser-localStorage-like).

    get() returns None for a key that was never written.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TaskPersistencePort(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: list[Task]) -> bool: ...
