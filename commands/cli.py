"""Interactive entry point for the Slatecast CLI."""

from __future__ import annotations

import logging
import os
from typing import List

from dotenv import load_dotenv
from rich.console import Console

from commands import Command, CommandError
from commands.exit_command import ExitCommand
from commands.help_command import HelpCommand
from commands.input_context import InputContext
from commands.project_command import ProjectCommand
from commands.set_input_command import SetInputCommand
from commands.slate_command import SlateCommand
from commands.starts_command import StartsCommand
from tools.utils.cli_common import CommandRegistry, prompt_with_completion

load_dotenv()

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"/exit"}


def build_registry(console: Console) -> CommandRegistry:
    """Create every command and register it under its name and aliases."""
    registry = CommandRegistry()
    input_context = InputContext(console)

    command_list: List[Command] = [
        HelpCommand(console, registry),
        ProjectCommand(console, input_context),
        SlateCommand(console, input_context),
        StartsCommand(console, input_context),
        SetInputCommand(console, input_context),
        ExitCommand(console, input_context),
    ]
    for command in command_list:
        registry.register(
            command.name,
            command.execute,
            command.description,
            aliases=command.aliases,
            help_handler=command.show_help,
        )
    return registry


def dispatch(line: str, registry: CommandRegistry, console: Console) -> bool:
    """Run a single command line, reporting command errors on the console.

    Returns:
        True when the line asks the CLI to exit
    """
    parts = line.split()
    ctx = registry.resolve(parts[0])
    if ctx is None:
        console.print(f"Unknown command: {parts[0]}. Type /help for options.", style="yellow")
        return False
    try:
        ctx.handler(line)
    except CommandError as err:
        console.print(str(err), style="red")
        return False
    return ctx.name in EXIT_COMMANDS and not {"-h", "--help"} & set(parts)


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    console = Console()
    registry = build_registry(console)
    completions = registry.completions()

    console.print("[bold cyan]Slatecast[/bold cyan] - type /help for commands.")
    while True:
        try:
            line = prompt_with_completion(completions)
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue
        if dispatch(line, registry, console):
            break

    logger.debug("Exiting Slatecast CLI")


if __name__ == "__main__":
    main()
