# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, which matches a raw argument vector against a
list of declared `Flag`s and renders usage/help text for them.

Each token is classified left to right:
- A token starting with `-` and longer than one character names a flag. It must
  match a declared flag's `-short` or `--long` form exactly, otherwise parsing
  fails with `ParseError`.
- A matched store-true flag is recorded as present with an empty value.
- A matched value-taking flag consumes the next token verbatim as its value,
  even when that token looks like a flag.
- Any other token is kept, in order, as a leftover.

After the scan, every declared flag that was not seen is either reported as a
missing required flag or recorded as absent.

Example Usage:
    flags = [
        Flag("h", "help", "Show this help message."),
        Flag("s", "say", "Text to echo.", takes_value=True),
    ]
    parser = Parser(sys.argv[1:], flags, "app", "Echo things.")
    try:
        table, leftovers = parser.parse()
    except ParseError as error:
        print(error)
        print(parser.usage())
        sys.exit(2)

    if table.has_flag("hhelp"):
        print(parser.help())

Design Notes:
Flags are kept in a private, sorted copy with optional flags first so that
required flags are listed last in usage and help. Duplicate match keys are
not rejected; they are logged and the later flag's outcome wins.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from rich.console import Console

from flagparse.exceptions import ParseError
from flagparse.flag import Flag
from flagparse.formatter import UsageFormatter
from flagparse.logger import logger
from flagparse.result import ParseOutcome, ResultTable
from flagparse.validators import is_flag_token


class Parser:
    """
    Matches argument tokens against declared flags.

    Attributes:
        tokens (tuple[str, ...]): The arguments to parse, without the program name.
        flags (tuple[Flag, ...]): Declared flags, optional ones first.
        name (str): Program name used in usage and help.
        description (str): Optional program description used in help.
    """

    def __init__(
        self,
        tokens: Iterable[str],
        flags: Sequence[Flag],
        name: str,
        description: str = "",
    ) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens)
        self.flags: tuple[Flag, ...] = tuple(sorted(flags, key=lambda flag: flag.required))
        self.name: str = name
        self.description: str = description
        self._formatter = UsageFormatter(self.flags, self.name, self.description)
        self._warn_duplicate_keys()

    def _warn_duplicate_keys(self) -> None:
        counts = Counter(flag.match_key for flag in self.flags)
        for match_key, count in counts.items():
            if count > 1:
                logger.warning(
                    "[%s] %d flags share the match key '%s'; their results will collide",
                    self.name,
                    count,
                    match_key,
                )

    def _find_flag(self, token: str) -> Flag | None:
        for flag in self.flags:
            if flag.matches(token):
                return flag
        return None

    def parse(self) -> tuple[ResultTable, list[str]]:
        """
        Parse the tokens against the declared flags.

        Returns:
            tuple[ResultTable, list[str]]: The outcome of every declared flag and
            the leftover tokens in their original order.

        Raises:
            ParseError: On an unknown flag, a value-taking flag without a value,
            or a missing required flag.
        """
        outcomes: dict[str, ParseOutcome] = {}
        leftovers: list[str] = []

        index = 0
        while index < len(self.tokens):
            token = self.tokens[index]
            if not is_flag_token(token):
                leftovers.append(token)
                index += 1
                continue

            flag = self._find_flag(token)
            if flag is None:
                logger.debug("[%s] Unknown flag token: %s", self.name, token)
                raise ParseError(f"unknown flag '{token}'")

            if flag.takes_value:
                if index + 1 >= len(self.tokens):
                    raise ParseError(f"flag {flag.display_ref()} requires an argument")
                outcomes[flag.match_key] = ParseOutcome(True, self.tokens[index + 1])
                index += 2
            else:
                outcomes[flag.match_key] = ParseOutcome(True)
                index += 1
            logger.debug("[%s] Matched %s -> %r", self.name, token, outcomes[flag.match_key])

        for flag in self.flags:
            if flag.match_key in outcomes:
                continue
            if flag.required:
                raise ParseError(f"required flag {flag.display_ref()} was not given")
            outcomes[flag.match_key] = ParseOutcome()

        logger.debug("[%s] Leftover tokens: %s", self.name, leftovers)
        return ResultTable(outcomes), leftovers

    def flag_usage(self) -> str:
        return self._formatter.flag_usage()

    def usage(self) -> str:
        return self._formatter.usage()

    def help(self) -> str:
        return self._formatter.help()

    def render_help(self, console: Console | None = None) -> None:
        self._formatter.render_help(console)

    def copy(
        self,
        tokens: Iterable[str] | None = None,
        name: str | None = None,
        description: str | None = None,
    ) -> Parser:
        """
        Create a new Parser with the same flags.

        Any argument left as None keeps this parser's value. The flags
        themselves are shared, not copied.
        """
        return Parser(
            self.tokens if tokens is None else tokens,
            self.flags,
            self.name if name is None else name,
            self.description if description is None else description,
        )

    def __str__(self) -> str:
        required = sum(flag.required for flag in self.flags)
        return (
            f"Parser(name={self.name!r}, flags={len(self.flags)}, "
            f"required={required}, tokens={len(self.tokens)})"
        )

    def __repr__(self) -> str:
        return str(self)
