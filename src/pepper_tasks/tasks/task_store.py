# src/pepper_tasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from .errors import ConflictError, NotFoundError, StoreCorruptionError, StoreIOError, ValidationError
from .task_models import (
    CHANNEL_FIELD,
    INTERVAL_FIELD,
    MESSAGE_FIELD,
    ChannelPatch,
    IntervalPatch,
    MessagePatch,
    RenamePatch,
    Task,
    TaskPatch,
)
from .validation import record_problem, validate_document

logger = logging.getLogger(__name__)

TaskRecords = dict[str, dict[str, Any]]


class JsonTaskStore:
    """
    JSON document task store.

    The whole store is one file holding `[{"<name>": {...task...}, ...}]`.

    Every mutation:
    - reads the whole document from disk,
    - validates its structure (aborting with "Invalid Task List."),
    - applies one change,
    - writes the whole document back (temp file + os.replace).

    Thread-safety:
    - a single lock serializes the read-validate-write sequence, so concurrent
      commands in one process cannot drop each other's updates.
      Multiple processes writing the same file are not coordinated.
    """

    def __init__(self, db_path: str | Path = "tasks-db.json") -> None:
        self._db_path = Path(db_path)
        self._lock = threading.Lock()
        self._ensure_document()
        logger.info("JsonTaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _ensure_document(self) -> None:
        try:
            if not self._db_path.exists():
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
                self._write_document({})
                logger.info("Created empty task list at %s", self._db_path)
        except OSError:
            logger.exception("Failed to initialise task list at %s", self._db_path)
        except StoreIOError:
            # Already logged by _write_document; commands will report the failure.
            pass

    def _read_document(self) -> Any:
        try:
            raw = self._db_path.read_text("utf-8")
            return json.loads(raw)
        except OSError:
            logger.exception("Failed to read task list from %s", self._db_path)
            raise StoreIOError() from None
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and oversized integer literals.
            logger.error("%s for the file in path: %s", e, self._db_path)
            raise StoreCorruptionError() from e

    def _write_document(self, tasks: TaskRecords) -> None:
        payload = json.dumps([tasks], ensure_ascii=False, indent=4)
        tmp = self._db_path.with_suffix(".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._db_path)
        except OSError:
            logger.exception("Failed to write task list to %s", self._db_path)
            raise StoreIOError() from None

    def _load_records(self, task_name: str = "") -> TaskRecords:
        document = self._read_document()
        if not validate_document(document, task_name):
            raise StoreCorruptionError()
        return document[0]

    @staticmethod
    def _checked_record(name: str, record: dict[str, Any], *, min_interval: int = 1) -> dict[str, Any]:
        problem = record_problem(name, record, min_interval=min_interval)
        if problem:
            raise ValidationError(f"Refusing to store malformed task: {problem}.")
        return record

    # ---- public API ----

    def load_tasks(self) -> dict[str, Task]:
        """Validated snapshot of every stored task (read-only, for schedulers)."""
        with self._lock:
            records = self._load_records()
        return {name: Task.from_record(record) for name, record in records.items()}

    def get_task(self, name: str) -> Task | None:
        return self.load_tasks().get(name)

    def create(self, name: str, task: Task) -> str:
        record = self._checked_record(name, task.to_record())
        with self._lock:
            tasks = self._load_records()
            if name in tasks:
                raise ConflictError(name)

            tasks[name] = record
            self._write_document(tasks)

        logger.info("Task created name=%s channel=%s interval=%s", name, record[CHANNEL_FIELD], record[INTERVAL_FIELD])
        return f"Task {name} activated on channel {record[CHANNEL_FIELD]}."

    def modify(self, name: str, patch: TaskPatch) -> str:
        """
        Apply a single-field patch to an existing task.

        RenamePatch moves the record under the new key untouched; the other patches
        overwrite one field in place, keeping the canonical field order.
        """
        with self._lock:
            tasks = self._load_records(task_name=name)
            if name not in tasks:
                raise NotFoundError(name)

            if isinstance(patch, RenamePatch):
                if patch.new_name != name:
                    if patch.new_name in tasks:
                        raise ConflictError(patch.new_name)
                    tasks[patch.new_name] = tasks.pop(name)
                    # The record moves untouched, so only the new key is held to the write rules.
                    self._checked_record(patch.new_name, tasks[patch.new_name], min_interval=0)
            else:
                updated = dict(tasks[name])
                if isinstance(patch, MessagePatch):
                    updated[MESSAGE_FIELD] = patch.message
                elif isinstance(patch, IntervalPatch):
                    updated[INTERVAL_FIELD] = int(patch.seconds)
                elif isinstance(patch, ChannelPatch):
                    updated[CHANNEL_FIELD] = patch.channel.lower()
                else:
                    raise TypeError(f"Unsupported task patch: {patch!r}")
                tasks[name] = self._checked_record(name, updated)

            self._write_document(tasks)

        logger.info("Task modified name=%s patch=%s", name, patch)
        return f"Task {name} successfully modified."

    def delete(self, name: str) -> str:
        with self._lock:
            tasks = self._load_records()
            if name not in tasks:
                raise NotFoundError(name)

            del tasks[name]
            self._write_document(tasks)

        logger.info("Task removed name=%s", name)
        return f"Task {name} successfully removed."

    def clear(self) -> str:
        """Reset the document to an empty task mapping, whatever it held before."""
        with self._lock:
            self._write_document({})

        logger.info("Task list cleared db=%s", self._db_path)
        return "The task list has been wiped clean."
