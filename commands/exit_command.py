"""Exit command for the Slatecast CLI."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console

from commands import Command
from commands.input_context import InputContext


class ExitCommand(Command):
    """Leave the CLI, noting the default input kept for the next session."""

    def __init__(self, console: Console, input_context: InputContext) -> None:
        super().__init__(console)
        self.input_context = input_context

    @property
    def name(self) -> str:
        return "/exit"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/quit",)

    @property
    def description(self) -> str:
        return "Exit the CLI."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        # The main loop stops after this runs.
        current = self.input_context.get_default_input_path()
        if current:
            self.console.print(f"Default input kept for next session: {current}", style="dim")
