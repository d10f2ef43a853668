# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
Defines all custom exception classes used by argstomp.

Two families exist: errors raised while building an option table (a developer
mistake in the declaration) and errors raised while binding tokens (a user
mistake on the command line). Every binding error carries the unprefixed long
name of the option it concerns so callers can build their own messages.

Exception Hierarchy:
- StompError
    ├── OptionTableError
    └── ParseError
        ├── MissingValueError
        ├── InvalidValueError
        ├── MissingRequiredOptionError
        └── UnwritableSlotError

Binding errors abort the current `parse` call immediately; nothing is
recovered internally.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argstomp.value_kind import ValueKind


class StompError(Exception):
    """Base exception for argstomp."""


class OptionTableError(StompError):
    """Exception raised when an option table is declared incorrectly."""


class ParseError(StompError):
    """Base exception for failures while binding tokens to an option table."""

    def __init__(self, option_name: str, message: str) -> None:
        super().__init__(message)
        self.option_name = option_name


class MissingValueError(ParseError):
    """Exception raised when a value-bearing option is the last token."""

    def __init__(self, option_name: str) -> None:
        super().__init__(option_name, f"No value given for option '--{option_name}'.")


class InvalidValueError(ParseError):
    """Exception raised when a value token cannot be coerced to the declared kind."""

    def __init__(
        self, option_name: str, raw_token: str, expected_kind: ValueKind
    ) -> None:
        super().__init__(
            option_name,
            f"Cannot convert '{raw_token}' to {expected_kind} "
            f"for option '--{option_name}'.",
        )
        self.raw_token = raw_token
        self.expected_kind = expected_kind


class MissingRequiredOptionError(ParseError):
    """Exception raised when a required option was never satisfied."""

    def __init__(self, option_name: str) -> None:
        super().__init__(
            option_name,
            f"Option '--{option_name}' is required, yet no given argument "
            "corresponds to it.",
        )


class UnwritableSlotError(ParseError):
    """Exception raised when the destination slot of an option cannot be written."""

    def __init__(self, option_name: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else "."
        super().__init__(
            option_name,
            f"Destination slot for option '--{option_name}' is not writable{detail}",
        )
