# src/taskboard/tasks/task_board.py

from __future__ import annotations

import logging

from ..core.ports import KeyValueStore
from ..core.reactive import StateCell
from ..errors import StorageParseError
from .task_models import Task, decode_tasks, encode_tasks, numeric_id

logger = logging.getLogger(__name__)

STORAGE_KEY = "tasks"


class TaskBoard:
    """
    In-memory task list with a write-through durable mirror.

    State cells:
    - tasks: the authoritative list for this session
    - new_task: the pending input value (controlled input)
    - next_id: id the next add() will use

    Every add()/delete() re-serializes the full list and writes it to the
    store before the new list is published, so the mirror and the cell
    never disagree after a mutation. Store write errors propagate.
    """

    def __init__(self, store: KeyValueStore, *, storage_key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = storage_key
        self._loaded = False

        self.tasks: StateCell[list[Task]] = StateCell([], name="tasks")
        self.new_task: StateCell[str] = StateCell("", name="new_task")
        self.next_id: StateCell[int] = StateCell(1, name="next_id")

    @property
    def storage_key(self) -> str:
        return self._key

    def load(self) -> None:
        """Hydrate from the mirror. Runs once; later calls are no-ops."""
        if self._loaded:
            return
        self._loaded = True

        raw = self._store.get(self._key)
        try:
            saved = decode_tasks(raw)
        except StorageParseError:
            logger.warning("Stored tasks are unreadable; starting empty key=%s", self._key, exc_info=True)
            saved = []

        # Ids that are not numbers are kept in the list but do not seed next_id.
        ids = [numeric_id(t.id) for t in saved]
        max_id = max([0, *(i for i in ids if i is not None)])
        self.tasks.set(saved)
        self.next_id.set(max_id + 1)
        logger.info("TaskBoard loaded tasks=%d next_id=%d", len(saved), max_id + 1)

    def set_input(self, value: str) -> None:
        self.new_task.set(value)

    def add(self, title: str | None = None) -> Task:
        """
        Append a task titled `title` (default: the pending input).

        No validation: empty and duplicate titles are kept as-is.
        """
        if title is None:
            title = self.new_task.get()

        before = self.tasks.get()
        task = Task(id=self.next_id.get(), title=title, description="")
        updated = [*before, task]
        logger.debug("add before=%s new=%r", before, title)

        self._persist(updated)
        self.tasks.set(updated)
        self.next_id.set(task.id + 1)
        self.new_task.set("")

        logger.debug("add after=%s", updated)
        return task

    def delete(self, task_id: int) -> bool:
        """Remove the first task with task_id; the mirror is rewritten either way."""
        before = self.tasks.get()
        logger.debug("delete before=%s id=%s", before, task_id)

        # A stored `true` id must not match 1.
        index = next(
            (i for i, t in enumerate(before) if t.id == task_id and not isinstance(t.id, bool)),
            -1,
        )
        updated = [t for i, t in enumerate(before) if i != index]

        self._persist(updated)
        self.tasks.set(updated)

        logger.debug("delete after=%s", updated)
        return index >= 0

    def _persist(self, tasks: list[Task]) -> None:
        self._store.set(self._key, encode_tasks(tasks))
