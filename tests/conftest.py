# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todolist.core.state import AppState
from todolist.storage.persistence import TaskPersistence
from todolist.tasks.task_models import FilterMode

from .fakes import FakeClock, InMemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todolist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        storage_backend="json",
        storage_path=tmp_path / "storage.json",
        storage_key="todos",
        default_filter=FilterMode.ALL,
    )


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: InMemoryStorage, clock: FakeClock) -> AppState:
    """AppState wired to in-memory storage and a deterministic clock."""
    return AppState(
        settings=settings,
        persistence=TaskPersistence(storage, key=settings.storage_key),
        clock=clock,
    )
