# src/todolist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_from_text
from ..cli.commands import registry as command_registry
from ..cli.view import render_task_list
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "todo> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    One REPL step: slash commands go to the registry, anything else is a new task.
    Returns the reply to print, or None for blank input.
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply
    return add_from_text(state, line)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todolist"))

    write(f"{app_name}: type a task to add it, /help for commands, /exit to quit.\n")
    write(render_task_list(state))

    while True:
        try:
            user_input = read(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.lower() in ("/exit", "/quit", "/q"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
