# src/pepper_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.state import AppState

CommandContext = dict[str, Any]
CommandHandler = Callable[[AppState, list[str], CommandContext], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple prefix-command registry used by connectors (!help, !say, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        context: CommandContext | None = None,
        prefix: str | None = None,
    ) -> str | None:
        """
        Handle a string like "!command args".
        Returns a reply string or None if not a command.
        """
        if prefix is None:
            prefix = str(getattr(state.settings, "command_prefix", "!"))
        if not prefix or not line.startswith(prefix):
            return None

        parts = line[len(prefix) :].split()
        if not parts:
            return f"Empty command. Use {prefix}help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {prefix}{name}. Use {prefix}help to list available commands."

        try:
            return handler(state, args, context or {})
        except Exception:
            logger.exception("Command handler crashed name=%s", name)
            return "Internal error while handling a command."

    def build_help(self, prefix: str) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {prefix}{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str], context: CommandContext) -> str:
    """
    !help      -> list commands
    !help say  -> full usage of the say command
    """
    if args and args[0].lower() == "say":
        return state.say.describe()
    return registry.build_help(state.say.prefix)


def cmd_say(state: AppState, args: list[str], context: CommandContext) -> str:
    return state.say.exec(context, args)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "say",
    cmd_say,
    help_text="Say something at every interval on a particular channel (see help say).",
)
