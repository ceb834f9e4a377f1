"""
Remote todos subsystem.

Components:
- todo_models.py: RemoteTodoItem + payload parsing
- todo_client.py: httpx-based TodoSource
- todo_loader.py: one-shot loader with loading/ready cells
"""
