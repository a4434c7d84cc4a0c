"""
Flagparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import FlagDeclarationError, FlagLookupError, FlagparseError, ParseError
from .flag import Flag
from .formatter import UsageFormatter
from .parser import Parser
from .result import ParseOutcome, ResultTable

logger = logging.getLogger("flagparse")

__version__ = "0.1.0"

__all__ = [
    "Flag",
    "FlagDeclarationError",
    "FlagLookupError",
    "FlagparseError",
    "ParseError",
    "ParseOutcome",
    "Parser",
    "ResultTable",
    "UsageFormatter",
]
