# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (storage/board/todo source).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.task_board import TaskBoard
from ..todos.todo_client import HttpTodoSource

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "memory":
        logger.info("Using in-memory storage; tasks will not survive a restart.")
        return MemoryKeyValueStore()
    return SqliteKeyValueStore(settings.storage_db_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv_store = create_kv_store(settings)

    board = TaskBoard(kv_store)
    board.load()

    todo_source = HttpTodoSource(settings.todos_url, limit=settings.todos_limit)

    return AppState(
        settings=settings,
        kv_store=kv_store,
        board=board,
        todo_source=todo_source,
    )
