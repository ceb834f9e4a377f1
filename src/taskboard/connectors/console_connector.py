# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..views.render import render_task_board

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    """
    Interactive task board.

    Plain text updates the pending input; slash commands act on it
    (/add, /delete <id>, /todos, ...).
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Type a task, then /add. Use /help for commands. Use /exit to quit.\n")

    state.board.load()
    _print_ts(render_task_board(state.board))

    def emit(text: str) -> None:
        # Immediate feedback while a command is still running (e.g. loading...)
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            _print_ts(cmd_response)
            continue

        state.board.set_input(user_input)
        _print_ts(f"Input: {user_input!r} (use /add to save it)")

    logger.info("Console connector finished.")
