# tests/test_commands.py

from __future__ import annotations

from todolist.cli.commands import CommandRegistry, registry, resolve_task_ref
from todolist.connectors.console_connector import handle_line, run_console_loop
from todolist.core import actions
from todolist.core.state import AppState
from todolist.storage.persistence import TaskPersistence

from .fakes import FailingStorage


def test_command_registry_routes_and_passes_raw_text(state: AppState) -> None:
    reg = CommandRegistry()
    seen: list[tuple[list[str], str]] = []

    def echo(state, args, raw):
        seen.append((args, raw))
        return "ok"

    reg.register("echo", echo, "echo", aliases=["e"])

    assert reg.handle(state, "/echo  a   b ") == "ok"
    assert reg.handle(state, "/E x") == "ok"
    assert seen == [(["a", "b"], "a   b"), (["x"], "x")]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_plain_text_adds_task(state: AppState) -> None:
    reply = handle_line(state, "Buy milk")
    assert reply is not None and 'Added "Buy milk"' in reply
    assert [t.text for t in state.tasks] == ["Buy milk"]
    assert handle_line(state, "   ") is None


def test_add_command_keeps_inner_spacing(state: AppState) -> None:
    registry.handle(state, "/add  Call  mom ")
    assert state.tasks[-1].text == "Call  mom"
    assert "Nothing to add" in (registry.handle(state, "/add    ") or "")
    assert len(state.tasks) == 1


def test_resolve_task_ref_by_position_and_id(state: AppState) -> None:
    first = actions.submit_task(state, "one")
    second = actions.submit_task(state, "two")
    assert first is not None and second is not None

    assert resolve_task_ref(state, "#2") == second.id
    assert resolve_task_ref(state, str(first.id)) == first.id
    assert resolve_task_ref(state, "#9") is None
    assert resolve_task_ref(state, "#x") is None
    assert resolve_task_ref(state, "abc") is None

    actions.toggle(state, first.id)
    actions.set_filter(state, "active")
    assert resolve_task_ref(state, "#1") == second.id


def test_toggle_delete_filter_commands(state: AppState) -> None:
    handle_line(state, "Buy milk")
    handle_line(state, "Walk dog")

    reply = registry.handle(state, "/toggle #1") or ""
    assert 'Marked "Buy milk" completed' in reply
    assert "Completed 1 of 2 tasks (50%)" in reply

    reply = registry.handle(state, "/filter done") or ""
    assert "[Completed]" in reply
    assert "Buy milk" in reply and "Walk dog" not in reply

    assert "Unknown filter" in (registry.handle(state, "/filter archived") or "")
    assert state.filter_mode == "completed"

    reply = registry.handle(state, "/del #1") or ""
    assert 'Deleted "Buy milk"' in reply
    assert "No completed tasks." in reply
    assert [t.text for t in state.tasks] == ["Walk dog"]

    assert "No task with id 5" in (registry.handle(state, "/toggle 5") or "")
    assert "Usage" in (registry.handle(state, "/del") or "")


def test_help_lists_exit_commands(state: AppState) -> None:
    reply = registry.handle(state, "/help") or ""
    assert "/exit" in reply
    assert "/quit" in reply and "/q" in reply


def test_list_and_stats_on_empty_state(state: AppState) -> None:
    listing = registry.handle(state, "/list") or ""
    assert "No tasks yet." in listing
    assert "Add a new task to get started!" in listing
    assert "Completed 0 of" not in listing

    assert registry.handle(state, "/stats") == "Total: 0  Active: 0  Completed: 0"


def test_failed_save_is_reported(settings) -> None:
    state = AppState(settings=settings, persistence=TaskPersistence(FailingStorage()))
    reply = handle_line(state, "Buy milk") or ""
    assert "Could not save tasks" in reply
    assert len(state.tasks) == 1


def test_console_loop_runs_until_exit(state: AppState) -> None:
    inputs = iter(["Buy milk", "/toggle #1", "", "/exit", "never read"])
    out: list[str] = []

    run_console_loop(state, read=lambda _prompt: next(inputs), write=out.append)

    assert state.tasks[0].completed is True
    assert any('Added "Buy milk"' in line for line in out)
    assert next(inputs) == "never read"


def test_console_loop_stops_on_eof(state: AppState) -> None:
    def read(_prompt: str) -> str:
        raise EOFError

    out: list[str] = []
    run_console_loop(state, read=read, write=out.append)
    assert any("No tasks yet." in line for line in out)
