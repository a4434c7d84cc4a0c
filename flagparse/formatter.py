# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders flag declarations as usage and help text.

`UsageFormatter` produces plain, newline-separated text meant for direct
display:

    app [-h|--help] [-v|--verbose] [-s|--say <value>]
    -n|--name <value>

    Arguments:
      -h  --help  Show this help message.
      ...

Usage entries are wrapped after every third flag. Help lines use a fixed
two-space gutter between the flag column and the description; columns are
not aligned across flags.

`render_help()` prints the same content through a Rich console.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from flagparse.console import console as default_console
from flagparse.flag import Flag

USAGE_ENTRIES_PER_LINE = 3
HELP_INDENT = "  "
HELP_GUTTER = "  "


class UsageFormatter:
    """
    Builds usage and help text for a program and its flags.

    Attributes:
        flags (tuple[Flag, ...]): Flags in display order.
        name (str): Program name shown at the start of the usage line.
        description (str): Optional program description shown in help.
    """

    def __init__(self, flags: Sequence[Flag], name: str, description: str = "") -> None:
        self.flags: tuple[Flag, ...] = tuple(flags)
        self.name: str = name
        self.description: str = description

    def flag_usage(self) -> str:
        """Return the flag part of the usage, e.g. `[-h|--help] [-s|--say <value>]`."""
        lines = []
        for start in range(0, len(self.flags), USAGE_ENTRIES_PER_LINE):
            chunk = self.flags[start : start + USAGE_ENTRIES_PER_LINE]
            lines.append(" ".join(flag.usage_entry() for flag in chunk))
        return "\n".join(lines)

    def usage(self) -> str:
        """Return the usage, e.g. `app [-h|--help] [-s|--say <value>]`."""
        flag_usage = self.flag_usage()
        if flag_usage:
            return f"{self.name} {flag_usage}"
        return self.name

    def _description_block(self) -> str:
        indent = " " * len(f"usage: {self.name} ")
        return f"{indent}{self.description}"

    def help(self) -> str:
        """Return the full help message usually shown for `-h` or `--help`."""
        text = f"{self.usage()}\n"
        if self.description:
            text += f"\n{self._description_block()}\n"
        text += "\nArguments:"
        for flag in self.flags:
            column, description = flag.help_entry()
            text += f"\n{HELP_INDENT}{column}{HELP_GUTTER}{description}"
        return text.strip()

    def render_help(self, console: Console | None = None) -> None:
        """
        Print the help message using Rich output.

        The text matches `help()`; the usage line and the header are styled.
        """
        console = console or default_console
        console.print(f"[bold]{escape(self.usage())}[/bold]", soft_wrap=True)
        if self.description:
            console.print()
            console.print(escape(self._description_block()), soft_wrap=True)
        console.print()
        console.print("[bold]Arguments:[/bold]")
        for flag in self.flags:
            column, description = flag.help_entry()
            console.print(
                f"{HELP_INDENT}[cyan]{escape(column)}[/cyan]{HELP_GUTTER}{escape(description)}",
                soft_wrap=True,
            )
