# src/taskboard/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..todos.todo_loader import TodoLoader
from ..views.render import render_task_board, render_todos

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    board = state.board
    backend = getattr(state.settings, "storage_backend", "?")
    url = getattr(state.settings, "todos_url", "?")
    return (
        "Status:\n"
        f"  Storage: {backend} (key={board.storage_key!r})\n"
        f"  Tasks: {len(board.tasks.get())}, next id: {board.next_id.get()}\n"
        f"  Todos URL: {url}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add          -> add the pending input as a task
    /add <title>  -> set the input to <title>, then add it
    """
    if args:
        state.board.set_input(" ".join(args))
    task = state.board.add()
    logger.debug("Task added via console id=%s", task.id)
    return render_task_board(state.board)


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>"
    try:
        task_id = int(args[0].lstrip("#"))
    except ValueError:
        return "Usage: /delete <id> (id must be a number)"
    state.board.delete(task_id)
    return render_task_board(state.board)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_board(state.board)


def cmd_todos(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    Open the remote todos screen: a fresh loader per visit, one fetch per loader.
    """
    loader = TodoLoader(
        state.todo_source,
        delay_seconds=float(getattr(state.settings, "todos_delay_seconds", 3.0)),
    )

    if emit:
        with contextlib.suppress(Exception):
            emit(render_todos(loader))

    asyncio.run(loader.activate())
    return render_todos(loader)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show storage and todos settings.")
registry.register("add", cmd_add, help_text="Add the current input as a task: /add [title].")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"])
registry.register("list", cmd_list, help_text="Show the task board.", aliases=["ls"])
registry.register("todos", cmd_todos, help_text="Load and show the remote todo list.")
