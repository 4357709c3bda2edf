# src/pepper_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Canonical on-disk field names, in the order they are written.
INTERVAL_FIELD = "totalWaitInterval"
CHANNEL_FIELD = "channel"
MESSAGE_FIELD = "taskMessage"
TASK_FIELDS: tuple[str, ...] = (INTERVAL_FIELD, CHANNEL_FIELD, MESSAGE_FIELD)


class ModifyField(StrEnum):
    """Keyword that follows `modify <task-name>` and selects what changes."""

    SAY = "say"
    EVERY = "every"
    ON = "on"
    NAMED = "named"


@dataclass(slots=True)
class Task:
    """A named recurring-message definition (the name is the store key)."""

    total_wait_interval: int
    channel: str
    task_message: str

    def to_record(self) -> dict[str, Any]:
        return {
            INTERVAL_FIELD: int(self.total_wait_interval),
            CHANNEL_FIELD: self.channel.lower(),
            MESSAGE_FIELD: self.task_message,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Task:
        return cls(
            total_wait_interval=int(record[INTERVAL_FIELD]),
            channel=str(record[CHANNEL_FIELD]),
            task_message=str(record[MESSAGE_FIELD]),
        )


# ---- modify patches (one per modifiable field) ----


@dataclass(slots=True, frozen=True)
class MessagePatch:
    message: str


@dataclass(slots=True, frozen=True)
class IntervalPatch:
    seconds: int


@dataclass(slots=True, frozen=True)
class ChannelPatch:
    channel: str


@dataclass(slots=True, frozen=True)
class RenamePatch:
    new_name: str


TaskPatch = MessagePatch | IntervalPatch | ChannelPatch | RenamePatch


# ---- parsed command requests ----


@dataclass(slots=True, frozen=True)
class CreateTask:
    name: str
    task: Task


@dataclass(slots=True, frozen=True)
class ModifyTask:
    name: str
    patch: TaskPatch


@dataclass(slots=True, frozen=True)
class DeleteTask:
    name: str


@dataclass(slots=True, frozen=True)
class ClearTasks:
    pass


TaskRequest = CreateTask | ModifyTask | DeleteTask | ClearTasks
