# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import actions
from ..core.state import AppState
from ..tasks.task_models import FilterMode
from .view import render_stats, render_task_list

# (state, split args, raw argument text) -> reply
CommandHandler = Callable[[AppState, list[str], str], str]

SAVE_FAILED_NOTICE = "[!] Could not save tasks; changes are kept for this session only."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, raw_args = body.partition(" ")
        name = name.lower()
        raw_args = raw_args.strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, raw_args.split(), raw_args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit (also /quit, /q).")
        lines.append("Plain text (without a leading /) adds it as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def resolve_task_ref(state: AppState, ref: str) -> int | None:
    """
    "#3" -> id of the 3rd task in the current view; "1714560000000" -> that id.
    Returns None when the reference cannot be parsed or is out of range.
    """
    ref = ref.strip()
    if ref.startswith("#"):
        try:
            pos = int(ref[1:])
        except ValueError:
            return None
        shown = actions.visible_tasks(state)
        if pos < 1 or pos > len(shown):
            return None
        return shown[pos - 1].id
    try:
        return int(ref)
    except ValueError:
        return None


def _with_save_notice(state: AppState, reply: str) -> str:
    if state.last_save_ok:
        return reply
    return f"{reply}\n{SAVE_FAILED_NOTICE}"


def add_from_text(state: AppState, text: str) -> str:
    task = actions.submit_task(state, text)
    if task is None:
        return _with_save_notice(state, "Nothing to add: task text is empty.")
    return _with_save_notice(state, f'Added "{task.text}".\n\n{render_task_list(state)}')


def cmd_help(state: AppState, args: list[str], raw: str) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], raw: str) -> str:
    return add_from_text(state, raw)


def cmd_toggle(state: AppState, args: list[str], raw: str) -> str:
    if not args:
        return "Usage: /toggle <id|#n>"
    task_id = resolve_task_ref(state, args[0])
    if task_id is None:
        return f"Not a task reference: {args[0]}"

    before = actions.toggle(state, task_id)
    if before is None:
        return _with_save_notice(state, f"No task with id {task_id}.")
    status = "active" if before.completed else "completed"
    return _with_save_notice(state, f'Marked "{before.text}" {status}.\n\n{render_task_list(state)}')


def cmd_delete(state: AppState, args: list[str], raw: str) -> str:
    if not args:
        return "Usage: /del <id|#n>"
    task_id = resolve_task_ref(state, args[0])
    if task_id is None:
        return f"Not a task reference: {args[0]}"

    removed = actions.delete(state, task_id)
    if removed is None:
        return _with_save_notice(state, f"No task with id {task_id}.")
    return _with_save_notice(state, f'Deleted "{removed.text}".\n\n{render_task_list(state)}')


def cmd_filter(state: AppState, args: list[str], raw: str) -> str:
    """
    /filter              -> show current filter
    /filter active       -> switch view
    """
    if not args:
        return f"Current filter: {state.filter_mode}. Use /filter all|active|completed."
    try:
        actions.set_filter(state, args[0])
    except ValueError:
        return f"Unknown filter: {args[0]}. Use /filter all|active|completed."
    return render_task_list(state)


def cmd_list(state: AppState, args: list[str], raw: str) -> str:
    return render_task_list(state)


def cmd_stats(state: AppState, args: list[str], raw: str) -> str:
    return render_stats(actions.current_stats(state))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register(
    "toggle", cmd_toggle, help_text="Toggle done/active: /toggle <id|#n>.", aliases=["t", "done"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <id|#n>.", aliases=["rm", "delete"])
registry.register(
    "filter",
    cmd_filter,
    help_text=f"Filter the view: /filter {'|'.join(m.value for m in FilterMode)}.",
    aliases=["f"],
)
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
