# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Flagparse output."""
from rich.console import Console
from rich.theme import Theme

FLAGPARSE_THEME = Theme(
    {
        "flag": "cyan",
        "error": "bold red",
    }
)

console = Console(theme=FLAGPARSE_THEME)
