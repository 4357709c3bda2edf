# tests/conftest.py

from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from pepper_tasks.cli.bootstrap import create_initial_state
from pepper_tasks.core.state import AppState
from pepper_tasks.tasks.say_command import SayCommand
from pepper_tasks.tasks.task_store import JsonTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="pepper-test",
        log_level="DEBUG",
        command_prefix="!",
        environment="test",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks-db.test.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> JsonTaskStore:
    return JsonTaskStore(settings.tasks_db_path)


@pytest.fixture()
def say(store: JsonTaskStore) -> SayCommand:
    return SayCommand(store, prefix="!")


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def read_document(settings: SimpleNamespace):
    """Return the raw JSON document currently on disk."""

    def _read():
        return json.loads(Path(settings.tasks_db_path).read_text("utf-8"))

    return _read


@pytest.fixture()
def write_document(settings: SimpleNamespace):
    """Overwrite the store file with an arbitrary document (or raw text)."""

    def _write(document) -> None:
        path = Path(settings.tasks_db_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        text = document if isinstance(document, str) else json.dumps(document, indent=4)
        path.write_text(text, "utf-8")

    return _write
