# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.tasks.task_board import TaskBoard

from .fakes import FakeTodoSource, RecordingKeyValueStore, make_todos


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="memory",
        storage_db_path=tmp_path / "storage.sqlite3",
        todos_url="https://todos.test/todos",
        todos_limit=20,
        todos_delay_seconds=0.0,
    )


@pytest.fixture()
def kv_store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def todo_source() -> FakeTodoSource:
    return FakeTodoSource(items=make_todos(3))


@pytest.fixture()
def state(settings: SimpleNamespace, kv_store: RecordingKeyValueStore, todo_source: FakeTodoSource) -> AppState:
    """AppState wired with an in-memory store and a fake todo source."""
    board = TaskBoard(kv_store)
    board.load()
    return AppState(
        settings=settings,
        kv_store=kv_store,
        board=board,
        todo_source=todo_source,
    )
