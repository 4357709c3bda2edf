# src/pepper_tasks/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..core.ports import TaskRepo
from ..tasks.say_command import SayCommand


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    task_store: TaskRepo
    say: SayCommand

    # Connectors hold this while handling one command.
    lock: threading.Lock = field(default_factory=threading.Lock)
