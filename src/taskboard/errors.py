# src/taskboard/errors.py

from __future__ import annotations


class StorageParseError(ValueError):
    """The durable mirror holds something that is not a JSON array of tasks."""


class FetchError(RuntimeError):
    """Remote todo list could not be retrieved (bad status, transport or body)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
