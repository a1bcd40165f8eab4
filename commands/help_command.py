"""Help command for the Slatecast CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command
from tools.utils.cli_common import CommandRegistry, show_capabilities


class HelpCommand(Command):
    """List commands, or show the arguments of one command."""

    def __init__(self, console: Console, registry: CommandRegistry) -> None:
        super().__init__(console)
        self.registry = registry

    @property
    def name(self) -> str:
        return "/help"

    @property
    def description(self) -> str:
        return "Display available commands, or the arguments of one command."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[command]",
                "required": False,
                "description": "Command or alias to describe (e.g. /starts, p)",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        if len(parts) < 2:
            show_capabilities(self.registry, self.console)
            return

        topic = parts[1] if parts[1].startswith("/") else f"/{parts[1]}"
        ctx = self.registry.resolve(topic)
        if ctx is None or ctx.help_handler is None:
            self.console.print(f"Unknown command: {topic}", style="yellow")
            return
        ctx.help_handler()
