# src/pepper_tasks/tasks/validation.py

"""
Field rules and whole-document structure checks for the task store.

The store document must look like:

    [
        {
            "<task name>": {
                "totalWaitInterval": <seconds>,
                "channel": "<channel_name>",
                "taskMessage": "<message>"
            },
            ...
        }
    ]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .task_models import CHANNEL_FIELD, INTERVAL_FIELD, MESSAGE_FIELD, TASK_FIELDS, ModifyField

logger = logging.getLogger(__name__)

INTERVAL_RE = re.compile(r"[0-9]+|(?:[0-9]+:){1,2}[0-9]+")
CHANNEL_RE = re.compile(r"[a-zA-Z0-9_]{4,25}")
TASK_NAME_RE = re.compile(r"[a-zA-Z0-9_-]{3,40}")

INTERVAL_MESSAGE = "Interval should be in h:m:s or m:s or s format."
CHANNEL_MESSAGE = (
    "Username should only contain alphanumeric and underscores, "
    "ranging from 4-25 characters only."
)
TASK_NAME_MESSAGE = (
    "Task names should only contain alphanumerics, hyphens "
    "and underscores, ranging from 3-40 characters only."
)

# Keyed by the command keyword that introduces the value.
FIELD_RULES: dict[str, tuple[re.Pattern[str], str]] = {
    ModifyField.EVERY: (INTERVAL_RE, INTERVAL_MESSAGE),
    ModifyField.ON: (CHANNEL_RE, CHANNEL_MESSAGE),
    ModifyField.NAMED: (TASK_NAME_RE, TASK_NAME_MESSAGE),
}

STRUCTURE_HINT = (
    "A valid task list should be of the format:\n"
    "[\n"
    "    {\n"
    '        "<task name>": {\n'
    '            "totalWaitInterval": <total_time_in_seconds>,\n'
    '            "channel": "<channel_name>",\n'
    '            "taskMessage": "<message>"\n'
    "        },\n"
    '        "<another task name>": {\n'
    "            ...\n"
    "        }...\n"
    "    }\n"
    "]"
)


def check_fields(fields: Mapping[str, str]) -> str | None:
    """
    Check only the supplied fields ("every", "on", "named") in order.

    Returns the first rule violation message, or None if everything passes.
    Unknown keys are ignored so callers can pass partial sets during modify.
    """
    for key, value in fields.items():
        rule = FIELD_RULES.get(key)
        if rule is None:
            continue
        pattern, message = rule
        if not pattern.fullmatch(value):
            return message
    return None


def record_problem(name: Any, record: Any, *, min_interval: int = 0) -> str | None:
    """
    Describe what is wrong with a single stored task, or None if it is well-formed.

    Reads accept any non-negative interval; writes pass min_interval=1.
    """
    if not isinstance(name, str) or not TASK_NAME_RE.fullmatch(name):
        return f"invalid task name {name!r}"
    if not isinstance(record, dict):
        return f"task {name!r} is not an object"
    if tuple(record.keys()) != TASK_FIELDS:
        return f"task {name!r} has fields {list(record.keys())}, expected {list(TASK_FIELDS)}"

    interval = record[INTERVAL_FIELD]
    if isinstance(interval, bool) or not isinstance(interval, int):
        return f"task {name!r} has a non-integer {INTERVAL_FIELD}"
    if interval < min_interval:
        return f"task {name!r} has {INTERVAL_FIELD} below {min_interval}"

    channel = record[CHANNEL_FIELD]
    if not isinstance(channel, str) or not CHANNEL_RE.fullmatch(channel):
        return f"task {name!r} has an invalid {CHANNEL_FIELD}"

    if not isinstance(record[MESSAGE_FIELD], str):
        return f"task {name!r} has a non-string {MESSAGE_FIELD}"
    return None


def document_problem(document: Any) -> str | None:
    """Describe the first structural problem of a whole store document."""
    if not isinstance(document, list) or len(document) != 1:
        return "document is not a single-element list"
    tasks = document[0]
    if not isinstance(tasks, dict):
        return "document does not hold a task mapping"
    for name, record in tasks.items():
        problem = record_problem(name, record)
        if problem:
            return problem
    return None


def validate_document(document: Any, task_name: str = "") -> bool:
    """
    Confirm the store document has the canonical structure.

    When task_name is given and that task exists with the wrong number of fields,
    the offending record is logged to help repair the file by hand.
    """
    problem = document_problem(document)
    if problem is None:
        return True

    logger.debug("Task list failed validation: %s", problem)

    if task_name and isinstance(document, list) and document and isinstance(document[0], dict):
        record = document[0].get(task_name)
        if isinstance(record, dict) and len(record) != len(TASK_FIELDS):
            logger.error("Unnecessary/missing attribute for the task '%s': %s", task_name, record)

    logger.info(STRUCTURE_HINT)
    return False
