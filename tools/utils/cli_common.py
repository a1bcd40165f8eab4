"""Common interactive CLI utilities for Slatecast."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import FuzzyWordCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console
from rich.markup import escape
from rich.table import Table

HISTORY_FILE = Path.home() / ".slatecast" / "history"


def _stdin_isatty() -> bool:
    """Check if stdin is a TTY (terminal)."""
    return sys.stdin.isatty()


@dataclass
class CommandContext:
    """Holds CLI command metadata."""

    name: str
    handler: Callable[[str], None]
    description: str
    aliases: Tuple[str, ...] = ()
    help_handler: Optional[Callable[[], None]] = None


class CommandRegistry:
    """Registers CLI commands and resolves aliases to them."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandContext] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        command: str,
        handler: Callable[[str], None],
        description: str,
        aliases: Sequence[str] = (),
        help_handler: Optional[Callable[[], None]] = None,
    ) -> None:
        self._commands[command] = CommandContext(
            command, handler, description, tuple(aliases), help_handler
        )
        for alias in aliases:
            self._aliases[alias] = command

    def resolve(self, name: str) -> Optional[CommandContext]:
        """Find a command by its name or one of its aliases."""
        return self._commands.get(self._aliases.get(name, name))

    def descriptions(self) -> Iterable[CommandContext]:
        return self._commands.values()

    def names(self) -> Sequence[str]:
        return tuple(sorted(self._commands))

    def completions(self) -> List[str]:
        return sorted([*self._commands, *self._aliases])


def prompt_with_completion(commands: Sequence[str], base_prompt: str = "/") -> str:
    if not _stdin_isatty():
        return input(f"{base_prompt} ").strip()

    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - interactive
        event.app.exit(result="")

    # Persistent history across sessions
    HISTORY_FILE.parent.mkdir(parents=True, exist_ok=True)
    history = FileHistory(str(HISTORY_FILE))

    if commands:
        return pt_prompt(
            f"{base_prompt} ",
            completer=FuzzyWordCompleter(list(commands)),
            complete_in_thread=True,
            complete_while_typing=True,
            key_bindings=kb,
            history=history,
        ).strip()

    return pt_prompt(f"{base_prompt} ", key_bindings=kb, history=history).strip()


def show_capabilities(registry: CommandRegistry, console_instance: Console) -> None:
    table = Table(title="Slatecast CLI Capabilities")
    table.add_column("Command", justify="left")
    table.add_column("Description", justify="left")

    for ctx in registry.descriptions():
        label = ", ".join([ctx.name, *ctx.aliases])
        table.add_row(label, ctx.description)

    console_instance.print(table)


def render_command_help(
    command_name: str,
    description: str,
    arguments: Sequence[Mapping[str, str | bool]],
    console_instance: Console,
) -> None:
    """Render help information for a command.

    Args:
        command_name: The command name (e.g., '/project')
        description: Command description
        arguments: List of argument definitions with 'name', 'required', 'description', 'default'
        console_instance: Rich Console instance to print to
    """
    console_instance.print(f"[bold cyan]{command_name}[/bold cyan] - {description}")

    if not arguments:
        console_instance.print("This command takes no arguments.\n")
        return

    usage = " ".join(str(arg.get("name", "")).split(",")[0] for arg in arguments)
    console_instance.print(f"Usage: {command_name} {usage}\n", markup=False)

    table = Table(title=f"{command_name} Arguments", show_header=True)
    table.add_column("Argument", justify="left", style="cyan")
    table.add_column("Required", justify="center", style="yellow")
    table.add_column("Default", justify="left", style="green")
    table.add_column("Description", justify="left")

    for arg in arguments:
        name = escape(str(arg.get("name", "")))
        required = "Yes" if arg.get("required") else "No"
        default = str(arg.get("default", "")) if arg.get("default") else "-"
        desc = escape(str(arg.get("description", "")))
        table.add_row(name, required, default, desc)

    console_instance.print(table)
