# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads flag declarations from YAML or TOML files.

Example (YAML):
    name: app
    description: Echo things.
    flags:
      - short: h
        long: help
        description: Show this help message.
      - short: s
        long: say
        description: Text to echo.
        store_true: false
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError

from flagparse.exceptions import FlagDeclarationError
from flagparse.flag import Flag
from flagparse.logger import logger
from flagparse.parser import Parser


class RawFlag(BaseModel):
    """Raw flag model for Flagparse configuration."""

    short: str = ""
    long: str = ""
    description: str = ""
    required: bool = False
    store_true: bool = True

    def to_flag(self) -> Flag:
        return Flag(
            self.short,
            self.long,
            self.description,
            required=self.required,
            takes_value=not self.store_true,
        )


class ParserConfig(BaseModel):
    """Program name, description and flags read from a configuration file."""

    name: str
    description: str = ""
    flags: list[RawFlag] = Field(default_factory=list)

    def to_flags(self) -> list[Flag]:
        return [raw_flag.to_flag() for raw_flag in self.flags]

    def to_parser(self, tokens: Iterable[str]) -> Parser:
        return Parser(tokens, self.to_flags(), self.name, self.description)


def find_config() -> Path | None:
    """Return the first configuration file that exists, if any."""
    candidates = []
    if os.environ.get("FLAGPARSE_CONFIG"):
        candidates.append(Path(os.environ["FLAGPARSE_CONFIG"]))
    candidates.extend(
        [
            Path.cwd() / "flagparse.yaml",
            Path.cwd() / "flagparse.yml",
            Path.cwd() / "flagparse.toml",
        ]
    )
    return next((path for path in candidates if path.is_file()), None)


def _read(path: Path) -> Any:
    text = path.read_text(encoding="UTF-8")
    if path.suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    elif path.suffix == ".toml":
        return toml.loads(text)
    raise FlagDeclarationError(f"Unsupported config file type: {path.suffix}")


def loader(file_path: Path | str) -> ParserConfig:
    """
    Load and validate a flag configuration file.

    Every declared flag is built once here so that invalid names are reported
    when the file is loaded rather than when it is first used.

    Raises:
        FlagDeclarationError: If the file is missing, unreadable, of an
            unsupported type, or declares invalid flags.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FlagDeclarationError(f"Config file not found: {path}")

    try:
        raw_config = _read(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        logger.error("Failed to read config '%s': %s", path, error)
        raise FlagDeclarationError(f"Could not parse config file {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise FlagDeclarationError(
            f"Config file {path} must contain a mapping with 'name' and 'flags'"
        )

    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise FlagDeclarationError(f"Invalid config file {path}: {error}") from error

    try:
        config.to_flags()
    except FlagDeclarationError as error:
        raise FlagDeclarationError(f"Invalid flag in {path}: {error}") from error

    logger.debug("Loaded %d flags from '%s'", len(config.flags), path)
    return config
