# src/pepper_tasks/core/ports.py

"""
Ports (interfaces) used by the core.

The command layer depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_models import Task, TaskPatch


class TaskRepo(Protocol):
    # Mutations: each returns the chat reply or raises a TaskCommandError.
    def create(self, name: str, task: Task) -> str: ...
    def modify(self, name: str, patch: TaskPatch) -> str: ...
    def delete(self, name: str) -> str: ...
    def clear(self) -> str: ...

    # Read API (external schedulers)
    def load_tasks(self) -> dict[str, Task]: ...
    def get_task(self, name: str) -> Task | None: ...
