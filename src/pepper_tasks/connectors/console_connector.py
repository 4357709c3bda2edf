# src/pepper_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    """Local stand-in for a chat channel: read command lines, print the bot's replies."""
    prefix = str(getattr(state.settings, "command_prefix", "!"))
    logger.info("Console connector started (prefix=%s).", prefix)
    _print_ts(f"[CONSOLE] Type commands. Use {prefix}help for commands. Use /exit to quit.\n")

    context = {"username": "console", "channel": "console"}

    while True:
        try:
            user_input = input(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        with state.lock:
            reply = command_registry.handle(state, user_input, context=context)

        if reply is None:
            _print_ts(f"Not a command. Use {prefix}help to list available commands.")
            continue

        _print_ts(reply)

    logger.info("Console connector finished.")
