# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `Parser` to describe one recognized
command-line switch.

A `Flag` carries a short and/or long name, a description, whether it must be
given and whether it consumes the token that follows it. The raw names are
kept as declared (`v`, `verbose`) and the dash-prefixed forms (`-v`,
`--verbose`) are what argument tokens are compared against.

Key Attributes:
- `short_name`: Raw short name, may be empty.
- `long_name`: Raw long name, may be empty.
- `description`: Help text shown in `Parser.help()`.
- `required`: Whether parsing fails when the flag is absent.
- `takes_value`: Whether the next token is consumed as the flag's value.

Derived:
- `match_key`: Raw short name followed by raw long name; the result table key.
- `matches(token)`: Whether an argument token names this flag.
- `help_entry()`, `usage_entry()`, `display_ref()`: text fragments for help,
  usage and error messages.

Example:
    verbose = Flag("v", "verbose", "Print more output.")
    verbose.match_key        # "vverbose"
    verbose.matches("-v")    # True
    verbose.usage_entry()    # "[-v|--verbose]"
"""
from __future__ import annotations

from dataclasses import dataclass

from flagparse.exceptions import FlagDeclarationError
from flagparse.validators import validate_flag_name


@dataclass(frozen=True)
class Flag:
    """
    Represents a declared command-line flag.

    Attributes:
        short_name (str): Short name without the leading `-`.
        long_name (str): Long name without the leading `--`.
        description (str): Help text for the flag.
        required (bool): True if the flag must appear in the arguments.
        takes_value (bool): True if the flag consumes the following token as its value.
            False (the default) makes it a store-true flag.

    Raises:
        FlagDeclarationError: If both names are empty or a name is malformed.
    """

    short_name: str
    long_name: str = ""
    description: str = ""
    required: bool = False
    takes_value: bool = False

    def __post_init__(self) -> None:
        validate_flag_name(self.short_name)
        validate_flag_name(self.long_name)
        if not self.short_name and not self.long_name:
            raise FlagDeclarationError(
                "the flag shorthand and longhand cannot both be empty"
            )

    @property
    def short_flag(self) -> str:
        """The dash-prefixed short form; just `-` when the short name is empty."""
        return f"-{self.short_name}"

    @property
    def long_flag(self) -> str:
        """The dash-prefixed long form; just `--` when the long name is empty."""
        return f"--{self.long_name}"

    @property
    def match_key(self) -> str:
        return self.short_name + self.long_name

    @property
    def store_true(self) -> bool:
        return not self.takes_value

    def matches(self, token: str) -> bool:
        """Return True if the token is exactly this flag's short or long form."""
        if not token:
            return False
        return token in (self.short_flag, self.long_flag)

    def help_entry(self) -> tuple[str, str]:
        """Return the (flag column, description) pair shown in help output."""
        column = self.long_flag
        if self.short_name:
            column = f"{self.short_flag}  {column}"
        return column, self.description

    def usage_entry(self) -> str:
        """Return the usage fragment, e.g. `[-s|--say <value>]`."""
        entry = self.long_flag
        if self.short_name:
            entry = f"{self.short_flag}|{entry}"
        if self.takes_value:
            entry += " <value>"
        return entry if self.required else f"[{entry}]"

    def display_ref(self) -> str:
        """Return the reference used in error messages, e.g. `s/say`."""
        if self.short_name:
            return f"{self.short_name}/{self.long_name}"
        return self.long_name

    def __str__(self) -> str:
        return f"Flag({self.display_ref()})"
