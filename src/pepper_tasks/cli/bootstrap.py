# src/pepper_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the JSON task store and the say command into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.say_command import SayCommand
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = JsonTaskStore(settings.tasks_db_path)
    say = SayCommand(task_store, prefix=settings.command_prefix)
    logger.debug("State ready env=%s db=%s", getattr(settings, "environment", "?"), settings.tasks_db_path)

    return AppState(settings=settings, task_store=task_store, say=say)
