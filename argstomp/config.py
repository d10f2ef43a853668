# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""config.py
Configuration loader for argstomp option tables."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from argstomp.exceptions import OptionTableError
from argstomp.logger import logger
from argstomp.option_table import OptionTable
from argstomp.value_kind import ValueKind


class RawOption(BaseModel):
    """Raw option model for argstomp table configuration."""

    model_config = ConfigDict(extra="forbid")

    dest: str
    long_name: str | None = None
    short_name: str | None = None
    required: bool = False
    value_kind: ValueKind = ValueKind.STRING
    default: Any = None
    help: str = ""

    @field_validator("value_kind", mode="before")
    @classmethod
    def validate_value_kind(cls, value: Any) -> ValueKind:
        if isinstance(value, ValueKind):
            return value
        if not isinstance(value, str):
            raise ValueError("value_kind must be a string.")
        return ValueKind(value)


def convert_options(raw_options: list[dict[str, Any]]) -> OptionTable:
    table = OptionTable()
    for index, entry in enumerate(raw_options):
        if not isinstance(entry, dict):
            raise OptionTableError(f"Option entry #{index} must be a mapping, got {entry!r}")
        try:
            raw_option = RawOption.model_validate(entry)
        except ValidationError as error:
            raise OptionTableError(f"Invalid option entry #{index}: {error}") from error
        table.add_option(**raw_option.model_dump())
    return table


def load_option_table(file_path: Path | str) -> OptionTable:
    """
    Load an option table from a YAML or TOML file.

    The file should contain a mapping with an `options` list. Each option is
    defined as a mapping with at least:
    - dest: the destination slot identifier

    and optionally `long_name`, `short_name`, `required`, `value_kind`,
    `default` and `help`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        OptionTable: The table declared by the file, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        OptionTableError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise OptionTableError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError) as error:
            raise OptionTableError(f"Cannot parse config file {path}: {error}") from error

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("options"), list
    ):
        raise OptionTableError(
            "Configuration file must contain a mapping with a list of options.\n"
            "Example:\n"
            "options:\n"
            "  - dest: 'first'\n"
            "    short_name: 'f'\n"
            "    required: true"
        )

    table = convert_options(raw_config["options"])
    logger.debug("Loaded %s from '%s'", table, path)
    return table
