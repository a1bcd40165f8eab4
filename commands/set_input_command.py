"""Set input command for the Slatecast CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from commands import InputCommand


class SetInputCommand(InputCommand):
    """Set or show the default projection input file."""

    @property
    def name(self) -> str:
        return "/set-input"

    @property
    def description(self) -> str:
        return "Set or show the default roster/schedule JSON file used by other commands."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                **self.INPUT_ARGUMENT,
                "default": "show current default",
                "description": "Path to a projection input JSON file",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        parts = command.split()
        if len(parts) < 2:
            current = self.input_context.get_default_input_path()
            if current:
                self.console.print(f"Default input: {current}")
            else:
                self.console.print("No default input set.", style="yellow")
            return

        path = Path(parts[1]).expanduser()
        # Only files that parse become the default.
        projection_input = self.input_context.resolve_input([str(path)])
        self.input_context.set_default_input_path(str(path.resolve()))
        self.console.print(
            f"Default input set to {path} "
            f"({len(projection_input.roster)} players, {len(projection_input.week_dates)} dates).",
            style="green",
        )
