"""Shared context for projection commands that read an input file."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console

from commands import CommandError
from tools.utils.input_loader import InputFormatError, ProjectionInput, load_projection_input


def split_flags(
    parts: Sequence[str], value_flags: Sequence[str]
) -> Tuple[List[str], Dict[str, str]]:
    """Split command parts into positionals and ``--flag value`` options.

    Args:
        parts: Command parts, excluding the command name itself
        value_flags: Flags (short or long) that take a value

    Returns:
        Tuple of (positional arguments, flag -> value)

    Raises:
        CommandError: If a value flag has no value
    """
    positionals: List[str] = []
    options: Dict[str, str] = {}
    i = 0
    while i < len(parts):
        if parts[i] in value_flags:
            if i + 1 >= len(parts):
                raise CommandError(f"Missing value for {parts[i]}")
            options[parts[i]] = parts[i + 1]
            i += 2
        else:
            positionals.append(parts[i])
            i += 1
    return positionals, options


def parse_today(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as err:
        raise CommandError(f"Invalid date: {value} (expected YYYY-MM-DD)") from err


class InputContext:
    """Manages the default projection input file for commands."""

    CONFIG_FILE = Path.home() / ".slatecast" / "config.json"

    def __init__(self, console: Console) -> None:
        self.console = console
        self._default_input_path: Optional[str] = None
        # Ensure ~/.slatecast/ directory exists
        self.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        self._load_config()

    def get_default_input_path(self) -> Optional[str]:
        """Get the currently set default input file."""
        return self._default_input_path

    def set_default_input_path(self, path: Optional[str]) -> None:
        """Set the default input file and persist to config file."""
        self._default_input_path = path
        self._save_config()

    def _load_config(self) -> None:
        """Load configuration from file."""
        if not self.CONFIG_FILE.exists():
            return

        try:
            with open(self.CONFIG_FILE, "r", encoding="utf-8") as f:
                config = json.load(f)
                self._default_input_path = config.get("default_input_path")
        except (json.JSONDecodeError, IOError) as err:
            # If config is corrupted, just start fresh
            self.console.print(
                f"Warning: Could not load config file: {err}", style="yellow"
            )

    def _save_config(self) -> None:
        """Save configuration to file."""
        try:
            config = {"default_input_path": self._default_input_path}
            with open(self.CONFIG_FILE, "w", encoding="utf-8") as f:
                json.dump(config, f, indent=2)
        except IOError as err:
            self.console.print(
                f"Warning: Could not save config file: {err}", style="yellow"
            )

    def resolve_input(self, positionals: Sequence[str]) -> ProjectionInput:
        """Load the input file named in the command, or the default one.

        Raises:
            CommandError: If no file is given and no default is set, or the
                file cannot be loaded
        """
        path = positionals[0] if positionals else self.get_default_input_path()
        if not path:
            raise CommandError("No input file given. Pass a path or use /set-input first.")
        try:
            return load_projection_input(path)
        except InputFormatError as err:
            raise CommandError(str(err)) from err
