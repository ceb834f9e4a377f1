# src/taskboard/todos/todo_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoteTodoItem:
    id: int
    title: str
    completed: bool


def parse_todos(payload: Any, *, limit: int | None = None) -> list[RemoteTodoItem]:
    """
    Convert a decoded JSON payload into RemoteTodoItem records.

    The payload must be a JSON array; non-object entries are skipped and
    extra keys (userId, ...) are ignored.
    """
    if not isinstance(payload, list):
        raise FetchError(f"Unexpected todos payload type: {type(payload).__name__}")

    out: list[RemoteTodoItem] = []
    for item in payload:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object todo entry: %r", item)
            continue
        try:
            tid = int(item.get("id", 0))
        except (TypeError, ValueError):
            logger.debug("Skipping todo entry with bad id: %r", item)
            continue
        out.append(
            RemoteTodoItem(
                id=tid,
                title=str(item.get("title", "")),
                completed=bool(item.get("completed", False)),
            )
        )

    if limit is not None:
        out = out[: max(0, int(limit))]
    return out
