"""
Flagparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from flagparse.config import find_config, loader
from flagparse.console import console
from flagparse.exceptions import FlagDeclarationError, ParseError
from flagparse.flag import Flag
from flagparse.parser import Parser
from flagparse.result import ResultTable
from flagparse.utils import setup_logging

HELP = Flag("h", "help", "Show this help message.")
SAY = Flag("s", "say", "Echo the given text.", takes_value=True)
VERBOSE = Flag("v", "verbose", "Log debug output.")

DEMO_FLAGS = [HELP, SAY, VERBOSE]
DEMO_DESCRIPTION = "Echo text, or parse arguments against a flagparse.yaml file."


def results_table(parser: Parser, table: ResultTable, leftovers: list[str]) -> Table:
    rich_table = Table(title=parser.name, box=box.SIMPLE)
    rich_table.add_column("Flag", style="flag")
    rich_table.add_column("Present")
    rich_table.add_column("Value")
    for flag in parser.flags:
        outcome = table[flag]
        rich_table.add_row(
            escape(flag.display_ref()), "yes" if outcome.present else "no", escape(outcome.value)
        )
    if leftovers:
        rich_table.caption = escape(f"leftovers: {' '.join(leftovers)}")
    return rich_table


def run_config(parser: Parser) -> int:
    table, leftovers = parser.parse()
    console.print(results_table(parser, table, leftovers))
    return 0


def run_demo(parser: Parser) -> int:
    verbose = any(VERBOSE.matches(token) for token in parser.tokens)
    setup_logging(console_log_level=logging.DEBUG if verbose else logging.WARNING)
    table, leftovers = parser.parse()

    if table.has_flag(HELP):
        parser.render_help()
        return 0

    present, text = table.try_get_flag(SAY)
    if present:
        console.print(escape(text), soft_wrap=True)
    for leftover in leftovers:
        console.print(escape(leftover), soft_wrap=True)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    tokens = sys.argv[1:] if argv is None else list(argv)
    parser = Parser(tokens, DEMO_FLAGS, "flagparse", DEMO_DESCRIPTION)
    config_path = find_config()
    if config_path:
        try:
            parser = loader(config_path).to_parser(tokens)
        except FlagDeclarationError as error:
            console.print(f"[error]error:[/error] {escape(str(error))}", soft_wrap=True)
            return 2

    try:
        if config_path:
            return run_config(parser)
        return run_demo(parser)
    except (FlagDeclarationError, ParseError) as error:
        console.print(f"[error]error:[/error] {escape(str(error))}", soft_wrap=True)
        console.print(f"usage: {escape(parser.usage())}", soft_wrap=True)
        return 2


if __name__ == "__main__":
    sys.exit(main())
