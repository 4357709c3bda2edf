# src/pepper_tasks/tasks/errors.py

"""
Errors raised by the task subsystem.

Each exception carries the plain-text reply that goes back to the chat,
so `str(err)` is always safe to relay.
"""

from __future__ import annotations

INVALID_TASK_LIST = "Invalid Task List."
STORE_UNAVAILABLE = "Could not access the task list."


class TaskCommandError(Exception):
    """Base class for every user-facing task command failure."""

    def __init__(self, reply: str) -> None:
        super().__init__(reply)
        self.reply = reply


class UsageError(TaskCommandError):
    """Malformed command shape; the reply is a usage/help string."""


class ValidationError(TaskCommandError):
    """A field failed its format rule."""


class ConflictError(TaskCommandError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task with name '{name}' already exists.")
        self.name = name


class NotFoundError(TaskCommandError):
    def __init__(self, name: str) -> None:
        super().__init__(f"The task '{name}' does not exist.")
        self.name = name


class StoreCorruptionError(TaskCommandError):
    """The task document failed to parse or to match the expected structure."""

    def __init__(self) -> None:
        super().__init__(INVALID_TASK_LIST)


class StoreIOError(TaskCommandError):
    """The task document could not be read or written."""

    def __init__(self) -> None:
        super().__init__(STORE_UNAVAILABLE)
