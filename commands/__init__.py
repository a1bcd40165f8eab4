"""Command modules for the Slatecast CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Set, Tuple

from rich.console import Console

if TYPE_CHECKING:
    from commands.input_context import InputContext
    from tools.utils.input_loader import ProjectionInput


class Command(ABC):
    """Base class for CLI commands."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @property
    @abstractmethod
    def name(self) -> str:
        """Primary command name (e.g., '/help')."""

    @property
    def aliases(self) -> Sequence[str]:
        """Additional aliases for this command (e.g., ['/quit'] for '/exit')."""
        return ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this command does."""

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        """Return list of argument definitions for this command.

        Each argument is a dict with keys:
        - name: The argument name (e.g., '-r', '--sort', '<player_name>')
        - required: Boolean indicating if the argument is required
        - description: Human-readable description of the argument
        - default: (optional) Default value if not provided

        Returns empty list by default (no arguments).
        """
        return []

    def should_show_help(self, command: str) -> bool:
        """Check if help flag (-h or --help) is present in command string."""
        parts = command.split()
        return "-h" in parts or "--help" in parts

    def show_help(self) -> None:
        """Display help information for this command."""
        from tools.utils.cli_common import render_command_help

        render_command_help(self.name, self.description, self.arguments, self.console)

    @abstractmethod
    def execute(self, command: str) -> None:
        """Execute the command with the full command string."""


class CommandError(Exception):
    """Raised when a command line cannot be parsed or its input cannot be loaded."""


class InputCommand(Command):
    """Base class for commands that project from a roster/schedule input file.

    The input file is the first positional argument, falling back to the
    default set with /set-input.
    """

    INPUT_ARGUMENT: Dict[str, str | bool] = {
        "name": "[path]",
        "required": False,
        "default": "default input",
        "description": "Projection input JSON (roster, gamesByDate, weekDates)",
    }
    TODAY_FLAGS = ("-t", "--today")

    def __init__(self, console: Console, input_context: InputContext) -> None:
        super().__init__(console)
        self.input_context = input_context

    def parse_command(
        self,
        command: str,
        value_flags: Sequence[str] = (),
        switches: Sequence[str] = (),
    ) -> Tuple[ProjectionInput, Dict[str, str], Set[str]]:
        """Load the input file and split out flag values and boolean switches.

        Returns:
            Tuple of (parsed input, flag -> value, switches present)

        Raises:
            CommandError: If a flag is missing its value or the input cannot be loaded
        """
        from commands.input_context import split_flags

        parts = command.split()[1:]
        present = {p for p in parts if p in switches}
        parts = [p for p in parts if p not in switches]
        positionals, options = split_flags(parts, value_flags)
        return self.input_context.resolve_input(positionals), options, present

    @staticmethod
    def option(options: Dict[str, str], *flags: str) -> Optional[str]:
        for flag in flags:
            if flag in options:
                return options[flag]
        return None
