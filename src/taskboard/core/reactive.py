# src/taskboard/core/reactive.py

"""
Observable state cells.

A StateCell holds one value and pushes every new value to its subscribers,
synchronously and in subscription order. Screens keep their state in cells
and renderers subscribe to them instead of relying on implicit re-renders.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class StateCell(Generic[T]):
    def __init__(self, initial: T, *, name: str = "") -> None:
        self._value = initial
        self._name = name
        self._subscribers: list[Callable[[T], None]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for fn in list(self._subscribers):
            try:
                fn(value)
            except Exception:
                # One broken renderer must not starve the others.
                logger.exception("StateCell subscriber failed cell=%s", self._name or "?")

    def subscribe(self, fn: Callable[[T], None]) -> Callable[[], None]:
        """Register fn; returns a callable that removes it again."""
        self._subscribers.append(fn)

        def _unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return _unsubscribe

    def __repr__(self) -> str:
        return f"StateCell({self._name or '?'}={self._value!r})"
