# src/todolist/cli/view.py

"""Plain-text rendering of the task list for the console."""

from __future__ import annotations

from ..core.actions import current_stats, visible_tasks
from ..core.state import AppState
from ..tasks.task_models import FilterMode, Task, TaskStats

FILTER_LABELS: dict[FilterMode, str] = {
    FilterMode.ALL: "All",
    FilterMode.ACTIVE: "Active",
    FilterMode.COMPLETED: "Completed",
}

EMPTY_MESSAGES: dict[FilterMode, tuple[str, str | None]] = {
    FilterMode.ALL: ("No tasks yet.", "Add a new task to get started!"),
    FilterMode.ACTIVE: ("No active tasks.", None),
    FilterMode.COMPLETED: ("No completed tasks.", None),
}


def render_filter_tabs(current: FilterMode) -> str:
    tabs = []
    for mode, label in FILTER_LABELS.items():
        tabs.append(f"[{label}]" if mode == current else f" {label} ")
    return " ".join(tabs)


def render_stats(stats: TaskStats) -> str:
    return f"Total: {stats.total}  Active: {stats.active}  Completed: {stats.completed}"


def render_footer(stats: TaskStats) -> str | None:
    if not stats.total:
        return None
    line = f"Completed {stats.completed} of {stats.total} tasks"
    if stats.completed:
        line += f" ({stats.percent_completed}%)"
    return line


def render_task(position: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"#{position} [{mark}] {task.text}  (id {task.id})"


def render_task_list(state: AppState) -> str:
    stats = current_stats(state)
    lines = [render_stats(stats), render_filter_tabs(state.filter_mode), ""]

    shown = visible_tasks(state)
    if not shown:
        title, hint = EMPTY_MESSAGES.get(state.filter_mode, EMPTY_MESSAGES[FilterMode.ALL])
        lines.append(f"  {title}")
        if hint:
            lines.append(f"  {hint}")
    else:
        lines.extend(f"  {render_task(i, t)}" for i, t in enumerate(shown, start=1))

    footer = render_footer(stats)
    if footer:
        lines.extend(["", footer])
    return "\n".join(lines)
