# src/todolist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading stored tasks), then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    # The console shows only warnings by default so log lines do not interleave
    # with the task list; the file keeps everything at the configured level.
    setup_logging(
        log_dir=settings.data_dir,
        console_level=max(level, logging.WARNING),
        file_level=level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
