# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the screens.

The board and the todo loader depend on Protocols instead of concrete
implementations, so storage and HTTP can be swapped in tests.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..todos.todo_models import RemoteTodoItem


class KeyValueStore(Protocol):
    """Durable string key-value mirror (the role localStorage plays in a browser)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...


class TodoSource(Protocol):
    """
    Remote todo list provider.

    Must raise FetchError on a non-success response, a transport error,
    or a body that is not a JSON array.
    """

    async def fetch_todos(self) -> list[RemoteTodoItem]: ...
