# src/todolist/storage/persistence.py

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any

from ..core.ports import KeyValueStorage
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "todos"


class MalformedTasksError(ValueError):
    """Stored value is not a valid serialized task list."""


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": task.created_at,
    }


def _dict_to_task(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise MalformedTasksError(f"record #{index} is not an object")

    tid = raw.get("id")
    text = raw.get("text")
    completed = raw.get("completed")
    created_at = raw.get("createdAt")

    # bool is a subclass of int; a boolean id is not a valid id.
    if not isinstance(tid, int) or isinstance(tid, bool):
        raise MalformedTasksError(f"record #{index}: id must be an integer")
    if not isinstance(text, str) or not text.strip():
        raise MalformedTasksError(f"record #{index}: text must be a non-empty string")
    if not isinstance(completed, bool):
        raise MalformedTasksError(f"record #{index}: completed must be a boolean")
    if not isinstance(created_at, str):
        raise MalformedTasksError(f"record #{index}: createdAt must be a string")

    return Task(id=tid, text=text, completed=completed, created_at=created_at)


def encode_tasks(tasks: list[Task]) -> str:
    return json.dumps([_task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_tasks(raw: str) -> list[Task]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedTasksError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedTasksError("top-level value is not a list")

    tasks = [_dict_to_task(item, i) for i, item in enumerate(data)]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise MalformedTasksError(f"duplicate task id {t.id}")
        seen.add(t.id)

    return tasks


class TaskPersistence:
    """
    Serializes the whole task list into one key of a KeyValueStorage.

    Neither load() nor save() raises: a broken or unreadable slot degrades to
    an empty list, a failed write is logged and reported via the return value.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get(self._key)
        except (OSError, sqlite3.Error):
            logger.exception("Failed to read task list key=%s", self._key)
            return []

        if raw is None or not raw.strip():
            logger.debug("No stored task list key=%s", self._key)
            return []

        try:
            tasks = decode_tasks(raw)
        except MalformedTasksError as e:
            logger.warning("Ignoring malformed task list key=%s: %s", self._key, e)
            return []

        logger.info("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: list[Task]) -> bool:
        try:
            self._storage.set(self._key, encode_tasks(tasks))
        except (OSError, sqlite3.Error):
            logger.exception("Failed to save task list key=%s", self._key)
            return False
        logger.debug("Saved %d tasks key=%s", len(tasks), self._key)
        return True
