# src/pepper_tasks/tasks/say_command.py

"""
The `say` command: recurring messages on a channel.

Grammar (tokens after the command name):
    <message...> every <h:m:s|m:s|s> on <channel> named <task-name>
    modify <task-name> say|every|on|named <value>
    modify <task-name> remove|delete
    clear task list

A create request is recognised by its trailing six-token metadata block:

    | message tokens          | every 1:0:0 on channel named task-name |
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..config import DB_PATH, get_settings
from ..core.ports import TaskRepo
from .errors import TaskCommandError, UsageError, ValidationError
from .interval import parse_seconds
from .task_models import (
    ChannelPatch,
    ClearTasks,
    CreateTask,
    DeleteTask,
    IntervalPatch,
    MessagePatch,
    ModifyField,
    ModifyTask,
    RenamePatch,
    Task,
    TaskRequest,
)
from .validation import check_fields

logger = logging.getLogger(__name__)

__all__ = ["DB_PATH", "SayCommand"]

CLEAR_PHRASE = "clear task list"
DELETE_WORDS = ("remove", "delete")
META_LENGTH = 6
INVALID_INTERVAL = "Please enter a valid interval."


class SayCommand:
    """Parses `say` requests and applies them to a task repository."""

    def __init__(self, task_store: TaskRepo, prefix: str | None = None) -> None:
        self.task_store = task_store
        self.prefix = get_settings().command_prefix if prefix is None else prefix

        self.help = "Say something at every interval on a particular channel."
        self.usage = f"{self.prefix}say <message> every <h>:<m>:<s> on <channel> named <task-name>"
        self.modify_usage = (
            f"{self.prefix}say modify <task-name> say|on|every|named "
            "<message>|<h>:<m>:<s>|<channel>|<task-name>"
        )
        self.example = f"{self.prefix}say my repeat message every 02:5:30 on pogTV named some-name"
        self.arguments = {
            "message": "Message to be repeated for every specified interval.",
            "channel": "Channel in which the bot says the specified message every set interval.",
            "task-name": "Unique name for the task.",
        }

    def describe(self) -> str:
        lines = [
            self.help,
            f"Usage: {self.usage}",
            f"Modify: {self.modify_usage}",
            f"Remove: {self.prefix}say modify <task-name> remove|delete",
            f"Example: {self.example}",
        ]
        lines.extend(f"  <{name}> - {text}" for name, text in self.arguments.items())
        return "\n".join(lines)

    # ---- entry point ----

    def exec(self, context: Any, request: Sequence[str]) -> str:
        """
        Run one `say` request and return the chat reply.

        Every failure (bad shape, bad field, missing/duplicate task, broken store)
        comes back as a reply string; nothing is raised to the transport.
        """
        try:
            parsed = self.parse(request)
            return self.apply(parsed)
        except TaskCommandError as e:
            logger.debug("say request rejected (%s): %s", type(e).__name__, e.reply)
            return e.reply

    def apply(self, request: TaskRequest) -> str:
        if isinstance(request, ClearTasks):
            return self.task_store.clear()
        if isinstance(request, CreateTask):
            return self.task_store.create(request.name, request.task)
        if isinstance(request, ModifyTask):
            return self.task_store.modify(request.name, request.patch)
        if isinstance(request, DeleteTask):
            return self.task_store.delete(request.name)
        raise TypeError(f"Unsupported task request: {request!r}")

    # ---- parsing ----

    def parse(self, request: Sequence[str]) -> TaskRequest:
        tokens = list(request)

        if " ".join(tokens) == CLEAR_PHRASE:
            return ClearTasks()
        if tokens and tokens[0] == "modify":
            return self._parse_modify(tokens[1:])
        return self._parse_create(tokens)

    def _parse_create(self, tokens: list[str]) -> CreateTask:
        message, meta = tokens[:-META_LENGTH], tokens[-META_LENGTH:]
        if (
            not message
            or len(meta) != META_LENGTH
            or meta[0] != ModifyField.EVERY
            or meta[2] != ModifyField.ON
            or meta[4] != ModifyField.NAMED
        ):
            raise UsageError(self.usage)

        _, every, _, on, _, name = meta

        violation = check_fields({ModifyField.EVERY: every, ModifyField.ON: on, ModifyField.NAMED: name})
        if violation:
            raise ValidationError(violation)

        seconds = parse_seconds(every)
        if not seconds:
            raise ValidationError(INVALID_INTERVAL)

        task = Task(total_wait_interval=seconds, channel=on.lower(), task_message=" ".join(message))
        return CreateTask(name=name, task=task)

    def _parse_modify(self, tokens: list[str]) -> ModifyTask | DeleteTask:
        if not tokens:
            raise UsageError(self.modify_usage)

        name, rest = tokens[0], tokens[1:]

        if len(rest) == 1 and rest[0] in DELETE_WORDS:
            return DeleteTask(name=name)

        if len(rest) < 2 or rest[0] not in tuple(ModifyField):
            raise UsageError(self.modify_usage)

        field = ModifyField(rest[0])
        values = rest[1:]

        if field is ModifyField.SAY:
            return ModifyTask(name=name, patch=MessagePatch(" ".join(values)))

        if len(values) != 1:
            raise UsageError(self.modify_usage)
        (value,) = values

        violation = check_fields({field: value})
        if violation:
            raise ValidationError(violation)

        if field is ModifyField.EVERY:
            seconds = parse_seconds(value)
            if not seconds:
                raise ValidationError(INVALID_INTERVAL)
            return ModifyTask(name=name, patch=IntervalPatch(seconds))
        if field is ModifyField.ON:
            return ModifyTask(name=name, patch=ChannelPatch(value.lower()))
        return ModifyTask(name=name, patch=RenamePatch(value))
