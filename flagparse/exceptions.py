# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagparse.

Exception Hierarchy:
- FlagparseError
    ├── FlagDeclarationError
    ├── ParseError
    └── FlagLookupError

Declaration errors are raised while flags are being built, parse errors while
a token sequence is being matched against them, and lookup errors when a
result table is queried with a key no flag registered.
"""


class FlagparseError(Exception):
    """Base exception for Flagparse."""


class FlagDeclarationError(FlagparseError):
    """Exception raised when a flag is declared with missing or malformed names."""


class ParseError(FlagparseError):
    """Exception raised when the argument tokens do not satisfy the declared flags."""


class FlagLookupError(FlagparseError, KeyError):
    """Exception raised when a result table is queried with an unregistered key."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
