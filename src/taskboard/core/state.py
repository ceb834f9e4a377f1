# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_board import TaskBoard
from .ports import KeyValueStore, TodoSource


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    kv_store: KeyValueStore
    board: TaskBoard
    todo_source: TodoSource
