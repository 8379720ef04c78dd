# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from todolist.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    # Drop only what setup_logging installed; pytest manages its own handlers.
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_only() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todolist.core.actions", logging.INFO))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logger: None) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
    logging.getLogger("todolist.test").debug("hello file")

    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in (tmp_path / "logs" / "todolist.log").read_text("utf-8")


def test_setup_logging_without_file(tmp_path: Path, restore_root_logger: None) -> None:
    setup_logging(log_dir=tmp_path / "logs", log_to_file=False)
    assert not (tmp_path / "logs").exists()
    assert len(logging.getLogger().handlers) == 1
