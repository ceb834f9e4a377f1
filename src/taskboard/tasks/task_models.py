# src/taskboard/tasks/task_models.py

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any

from ..errors import StorageParseError

logger = logging.getLogger(__name__)

# Marks a Task decoded from a well-formed object (nothing to replay verbatim).
_NO_RAW: Any = object()


@dataclass(frozen=True, slots=True)
class Task:
    """
    One stored task.

    Tasks created by add() always have an int id and str title. Entries read
    back from the mirror are kept as stored: odd id/title types stay as they
    are, unknown keys travel in `extra`, and entries that are not objects at
    all are replayed from `raw`, so rewriting the mirror never drops data.
    """

    id: Any
    title: Any
    description: Any = ""
    extra: dict[str, Any] = field(default_factory=dict)
    raw: Any = _NO_RAW

    def to_dict(self) -> Any:
        if self.raw is not _NO_RAW:
            return self.raw
        out = {"id": self.id, "title": self.title, "description": self.description}
        for k, v in self.extra.items():
            out.setdefault(k, v)
        return out

    @classmethod
    def from_stored(cls, item: Any) -> Task:
        if not isinstance(item, dict):
            logger.warning("Keeping non-object task entry as-is: %r", item)
            return cls(id=None, title="", raw=item)
        extra = {k: v for k, v in item.items() if k not in ("id", "title", "description")}
        return cls(
            id=item.get("id"),
            title=item.get("title", ""),
            description=item.get("description", ""),
            extra=extra,
        )


def numeric_id(value: Any) -> int | None:
    """
    Lenient id coercion for seeding next_id: ints, finite floats and numeric
    strings count; anything else (bool, None, "abc", ...) is ignored.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float) and math.isfinite(value):
        return math.floor(value)
    return None


def encode_tasks(tasks: list[Task]) -> str:
    """Serialize the full list for the durable mirror (JSON array)."""
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)


def decode_tasks(raw: str | None) -> list[Task]:
    """
    Parse the durable mirror.

    None or "" -> [].
    Invalid JSON or anything but a JSON array -> StorageParseError.
    Every array entry is kept, whatever its shape.
    """
    if raw is None or raw.strip() == "":
        return []

    try:
        data = json.loads(raw)
    except ValueError as e:
        raise StorageParseError(f"tasks mirror is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise StorageParseError(f"tasks mirror is not a JSON array (got {type(data).__name__})")

    return [Task.from_stored(item) for item in data]
