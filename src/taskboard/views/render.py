# src/taskboard/views/render.py

from __future__ import annotations

from ..tasks.task_board import TaskBoard
from ..todos.todo_loader import TodoLoader


def render_task_board(board: TaskBoard) -> str:
    lines = ["Task Board", f"  Input: {board.new_task.get()!r}"]
    tasks = board.tasks.get()
    if not tasks:
        lines.append("  (no tasks)")
    for t in tasks:
        lines.append(f"  #{t.id} {t.title}")
    return "\n".join(lines)


def render_todos(loader: TodoLoader) -> str:
    if loader.loading.get():
        return "Todos\n  loading..."
    lines = ["Todos"]
    for item in loader.todos.get():
        suffix = " Done" if item.completed else ""
        lines.append(f"  {item.title}{suffix}")
    return "\n".join(lines)
