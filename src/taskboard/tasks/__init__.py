"""
Task board subsystem.

Components:
- task_models.py: Task record + JSON encoding of the durable mirror
- task_board.py: in-memory list with write-through persistence
"""
