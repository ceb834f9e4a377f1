# tests/test_commands.py

from __future__ import annotations

import json

from taskboard.cli.bootstrap import create_initial_state
from taskboard.cli.commands import CommandRegistry, registry
from taskboard.errors import FetchError
from taskboard.storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")


def test_add_list_delete_through_commands(state, kv_store) -> None:
    state.board.set_input("pending title")
    out = registry.handle(state, "/add")
    assert "#1 pending title" in (out or "")

    registry.handle(state, "/add buy milk")
    assert [t.title for t in state.board.tasks.get()] == ["pending title", "buy milk"]

    out = registry.handle(state, "/delete 1")
    assert "#1" not in (out or "")
    assert json.loads(kv_store.get("tasks") or "") == [
        {"id": 2, "title": "buy milk", "description": ""}
    ]

    assert "#2 buy milk" in (registry.handle(state, "/ls") or "")


def test_delete_requires_numeric_id(state) -> None:
    assert "Usage" in (registry.handle(state, "/delete abc") or "")
    assert "Usage" in (registry.handle(state, "/rm") or "")


def test_todos_command_emits_loading_then_items(state, todo_source) -> None:
    emitted: list[str] = []

    out = registry.handle(state, "/todos", emit=emitted.append)

    assert emitted == ["Todos\n  loading..."]
    assert out is not None
    assert "todo 2 Done" in out
    assert "todo 1" in out and "todo 1 Done" not in out
    assert todo_source.calls == 1


def test_todos_command_mounts_a_fresh_loader_each_time(state, todo_source) -> None:
    registry.handle(state, "/todos")
    registry.handle(state, "/todos")
    assert todo_source.calls == 2


def test_todos_command_failure_renders_empty(state, todo_source) -> None:
    todo_source.error = FetchError("Failed to fetch: HTTP 500", status_code=500)

    out = registry.handle(state, "/todos")

    assert out == "Todos"


def test_status_reports_board(state) -> None:
    state.board.add("x")
    out = registry.handle(state, "/status") or ""
    assert "Tasks: 1, next id: 2" in out
    assert "https://todos.test/todos" in out


def test_bootstrap_wires_backend_from_settings(settings) -> None:
    st = create_initial_state(settings=settings)
    assert isinstance(st.kv_store, MemoryKeyValueStore)
    assert st.board.next_id.get() == 1

    settings.storage_backend = "sqlite"
    st = create_initial_state(settings=settings)
    assert isinstance(st.kv_store, SqliteKeyValueStore)
    st.board.add("persisted")

    again = create_initial_state(settings=settings)
    assert [t.title for t in again.board.tasks.get()] == ["persisted"]
    assert again.board.next_id.get() == 2
