# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name and token checks shared by `Flag` and `Parser`.

Included Validators:
- validate_flag_name: Enforces the allowed shape of a raw short or long flag name.
- is_flag_token: Decides whether an argument token should be treated as a flag name.

A valid flag name is made of ASCII letters, digits and hyphens, is not made
only of hyphens, and neither starts nor ends with a hyphen. Empty names are
accepted here; whether a flag may leave a name empty is decided by `Flag`.
"""
import string

from flagparse.exceptions import FlagDeclarationError

FLAG_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-")


def validate_flag_name(name: str) -> None:
    """
    Validate a raw flag name.

    Args:
        name (str): The name without any leading dashes, e.g. `v` or `verbose`.

    Raises:
        FlagDeclarationError: If the name is not a string or breaks a shape rule.
    """
    if not isinstance(name, str):
        raise FlagDeclarationError(f"flag names must be strings, got {type(name).__name__}")
    if not name:
        return

    if any(char not in FLAG_CHARACTERS for char in name):
        raise FlagDeclarationError(
            "flags can only contain alphanumeric characters or hyphens('-')"
        )
    if name.count("-") == len(name):
        raise FlagDeclarationError("flags cannot only contain hyphens")
    if name.startswith("-"):
        raise FlagDeclarationError("flags cannot begin with a hyphen")
    if name.endswith("-"):
        raise FlagDeclarationError("flags cannot end with a hyphen")


def is_flag_token(token: str) -> bool:
    """Return True if the token names a flag; a bare `-` never does."""
    return len(token) > 1 and token[0] == "-"
