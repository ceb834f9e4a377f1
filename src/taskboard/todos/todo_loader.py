# src/taskboard/todos/todo_loader.py

from __future__ import annotations

"""
One-shot remote todo loader.

Per mount:
  Loading -> Ready(items)             on success (after the artificial delay)
  Loading -> Ready([], error logged)  on FetchError

Both end states are terminal: activate() fetches at most once, and the
loading flag is cleared exactly once in a finally step.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..core.ports import TodoSource
from ..core.reactive import StateCell
from ..errors import FetchError
from .todo_models import RemoteTodoItem

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class TodoLoader:
    def __init__(
        self,
        source: TodoSource,
        *,
        delay_seconds: float = 3.0,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._source = source
        self._delay = max(0.0, float(delay_seconds))
        self._sleep = sleep
        self._started = False

        self.todos: StateCell[list[RemoteTodoItem]] = StateCell([], name="todos")
        self.loading: StateCell[bool] = StateCell(True, name="loading")
        # Diagnostics only; never rendered.
        self.error: StateCell[str | None] = StateCell(None, name="error")

    @property
    def started(self) -> bool:
        return self._started

    async def activate(self) -> None:
        if self._started:
            return
        self._started = True

        try:
            items = await self._source.fetch_todos()
            # Simulated latency before results become visible.
            await self._sleep(self._delay)
            self.todos.set(items)
            logger.info("Loaded %d todos", len(items))
        except FetchError as e:
            self.error.set(str(e))
            logger.error("Todo fetch failed: %s", e)
        finally:
            self.loading.set(False)
