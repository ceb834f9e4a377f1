# tests/fakes.py

from __future__ import annotations

from taskboard.errors import FetchError
from taskboard.storage.kv_store import MemoryKeyValueStore
from taskboard.todos.todo_models import RemoteTodoItem


class FakeTodoSource:
    """
    Deterministic TodoSource for unit tests.

    - Counts calls for the single-fetch assertions
    - Returns `items`, or raises `error` when given
    """

    def __init__(
        self,
        items: list[RemoteTodoItem] | None = None,
        error: FetchError | None = None,
    ) -> None:
        self.items = list(items or [])
        self.error = error
        self.calls = 0

    async def fetch_todos(self) -> list[RemoteTodoItem]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.items)


class RecordingKeyValueStore(MemoryKeyValueStore):
    """MemoryKeyValueStore that remembers every write."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


class BrokenKeyValueStore(MemoryKeyValueStore):
    """Reads work, writes fail (disk full, permissions, ...)."""

    def set(self, key: str, value: str) -> None:
        raise OSError("storage is read-only")


def make_todos(n: int) -> list[RemoteTodoItem]:
    return [RemoteTodoItem(id=i, title=f"todo {i}", completed=i % 2 == 0) for i in range(1, n + 1)]
