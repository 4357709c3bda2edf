# tests/test_say_command.py

from __future__ import annotations

import pytest

from pepper_tasks.tasks.say_command import INVALID_INTERVAL, SayCommand
from pepper_tasks.tasks.task_models import (
    ChannelPatch,
    ClearTasks,
    CreateTask,
    DeleteTask,
    IntervalPatch,
    MessagePatch,
    ModifyTask,
    RenamePatch,
    Task,
)
from pepper_tasks.tasks.validation import CHANNEL_MESSAGE, INTERVAL_MESSAGE, TASK_NAME_MESSAGE

CONTEXT = {"username": "tester"}


def run(say: SayCommand, line: str) -> str:
    return say.exec(CONTEXT, line.split())


# ---- parsing ----


def test_parse_create(say: SayCommand) -> None:
    parsed = say.parse("my repeat message every 02:5:30 on pogTV named bot-task".split())
    assert parsed == CreateTask(
        name="bot-task",
        task=Task(total_wait_interval=7530, channel="pogtv", task_message="my repeat message"),
    )


def test_parse_modify_variants(say: SayCommand) -> None:
    assert say.parse("modify bot-task say hello there".split()) == ModifyTask(
        "bot-task", MessagePatch("hello there")
    )
    assert say.parse("modify bot-task every 1:00".split()) == ModifyTask("bot-task", IntervalPatch(60))
    assert say.parse("modify bot-task on NewChan".split()) == ModifyTask("bot-task", ChannelPatch("newchan"))
    assert say.parse("modify bot-task named better-name".split()) == ModifyTask(
        "bot-task", RenamePatch("better-name")
    )
    assert say.parse("modify bot-task remove".split()) == DeleteTask("bot-task")
    assert say.parse("modify bot-task delete".split()) == DeleteTask("bot-task")


def test_parse_clear(say: SayCommand) -> None:
    assert say.parse("clear task list".split()) == ClearTasks()


# ---- end to end ----


def test_scenario_create_modify_delete(say: SayCommand, read_document) -> None:
    assert run(say, "my repeat message every 2:5:30 on pogtv named bot-task") == (
        "Task bot-task activated on channel pogtv."
    )
    assert run(say, "modify bot-task on newchan") == "Task bot-task successfully modified."
    assert read_document()[0]["bot-task"]["channel"] == "newchan"
    assert run(say, "modify bot-task remove") == "Task bot-task successfully removed."
    assert read_document() == [{}]


@pytest.mark.parametrize(
    "line",
    [
        "",
        "every 1 on pogtv named bot-task",
        "hello every 1 on pogtv",
        "hello at 1 on pogtv named bot-task",
        "hello every 1 in pogtv named bot-task",
        "hello every 1 on pogtv called bot-task",
        "hello every 1 on pogtv named",
    ],
)
def test_malformed_create_returns_usage(say: SayCommand, line: str) -> None:
    assert run(say, line) == say.usage
    assert say.usage.startswith("!say <message>")


def test_create_validation_messages(say: SayCommand, read_document) -> None:
    assert run(say, "hi every 1:2:3:4 on pogtv named bot-task") == INTERVAL_MESSAGE
    assert run(say, "hi every 10 on p named bot-task") == CHANNEL_MESSAGE
    assert run(say, "hi every 10 on pogtv named b!") == TASK_NAME_MESSAGE
    assert run(say, "hi every 0:0 on pogtv named bot-task") == INVALID_INTERVAL
    assert read_document() == [{}]


def test_create_duplicate_name(say: SayCommand) -> None:
    run(say, "hi every 10 on pogtv named bot-task")
    assert run(say, "other every 20 on other_chan named bot-task") == (
        "Task with name 'bot-task' already exists."
    )


@pytest.mark.parametrize(
    "line",
    [
        "modify",
        "modify bot-task",
        "modify bot-task every",
        "modify bot-task say",
        "modify bot-task rename new-name",
        "modify bot-task every 1 2",
        "modify bot-task on a b",
    ],
)
def test_malformed_modify_returns_modify_usage(say: SayCommand, line: str) -> None:
    assert run(say, line) == say.modify_usage


def test_modify_validation_messages(say: SayCommand) -> None:
    run(say, "hi every 10 on pogtv named bot-task")
    assert run(say, "modify bot-task every 1:x") == INTERVAL_MESSAGE
    assert run(say, "modify bot-task every 0") == INVALID_INTERVAL
    assert run(say, "modify bot-task on no") == CHANNEL_MESSAGE
    assert run(say, "modify bot-task named no") == TASK_NAME_MESSAGE


def test_modify_message_and_rename(say: SayCommand, read_document) -> None:
    run(say, "hi every 10 on pogtv named bot-task")
    assert run(say, "modify bot-task say a brand new message") == "Task bot-task successfully modified."
    assert run(say, "modify bot-task named moved-task") == "Task bot-task successfully modified."

    tasks = read_document()[0]
    assert list(tasks) == ["moved-task"]
    assert tasks["moved-task"] == {
        "totalWaitInterval": 10,
        "channel": "pogtv",
        "taskMessage": "a brand new message",
    }


def test_modify_or_delete_missing_task(say: SayCommand) -> None:
    assert run(say, "modify ghost say boo") == "The task 'ghost' does not exist."
    assert run(say, "modify ghost delete") == "The task 'ghost' does not exist."


def test_clear_task_list(say: SayCommand, read_document) -> None:
    run(say, "hi every 10 on pogtv named bot-task")
    run(say, "yo every 20 on pogtv named other-task")
    assert run(say, "clear task list") == "The task list has been wiped clean."
    assert read_document() == [{}]


def test_corrupted_store_reply(say: SayCommand, write_document) -> None:
    write_document([{"bot-task": {"totalWaitInterval": 10, "channel": "pogtv"}}])
    assert run(say, "hi every 10 on pogtv named new-task") == "Invalid Task List."
    assert run(say, "modify bot-task say hi") == "Invalid Task List."
    assert run(say, "modify bot-task delete") == "Invalid Task List."


def test_unreadable_store_reply(say: SayCommand, settings) -> None:
    settings.tasks_db_path.unlink()
    assert run(say, "modify bot-task delete") == "Could not access the task list."


def test_exec_does_not_mutate_request(say: SayCommand) -> None:
    request = "hi every 10 on pogtv named bot-task".split()
    snapshot = list(request)
    say.exec(CONTEXT, request)
    assert request == snapshot


def test_describe_uses_prefix(store) -> None:
    say = SayCommand(store, prefix="?")
    text = say.describe()
    assert "?say <message> every <h>:<m>:<s> on <channel> named <task-name>" in text
    assert "?say modify <task-name> remove|delete" in text
    assert "<task-name> - Unique name for the task." in text


def test_huge_interval_gets_a_reply(say: SayCommand, read_document) -> None:
    huge = "9" * 5000
    assert run(say, f"hi every {huge} on pogtv named bot-task") == INVALID_INTERVAL
    assert read_document() == [{}]

    run(say, "hi every 10 on pogtv named bot-task")
    assert run(say, f"modify bot-task every 1:{huge}") == INVALID_INTERVAL
    assert read_document()[0]["bot-task"]["totalWaitInterval"] == 10


def test_undecodable_store_gets_a_reply(say: SayCommand, settings) -> None:
    settings.tasks_db_path.write_bytes(b'[{"\xff\xfe": 1}]')
    assert run(say, "hi every 10 on pogtv named bot-task") == "Invalid Task List."
    assert run(say, "modify bot-task delete") == "Invalid Task List."


def test_store_with_oversized_number_gets_a_reply(say: SayCommand, write_document) -> None:
    write_document('[{"bot-task": {"totalWaitInterval": ' + "9" * 5000 + ', "channel": "pogtv", "taskMessage": "x"}}]')
    assert run(say, "modify bot-task say hi") == "Invalid Task List."
