# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
Defines `ValueKind`, the closed set of value types an option can bind.

The kind of an option decides how the token following a match site is coerced
before it is written to the destination slot. Integer kinds carry a fixed
signed width, floating kinds a fixed precision, and `BOOLEAN` switches the
binder to toggle semantics.

Supports alias coercion for shorthand or config-friendly values, and resolution
from plain Python types for dataclass-driven tables.

Example:
    ValueKind("integer") → ValueKind.INTEGER
    ValueKind("int")     → ValueKind.INTEGER (via alias)
    ValueKind.from_type(bool) → ValueKind.BOOLEAN
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(Enum):
    """
    Declared value type of an option.

    Members:
        STRING: The value token, verbatim.
        INTEGER: 32-bit signed integer.
        LONG: 64-bit signed integer.
        SHORT: 16-bit signed integer.
        BYTE: 8-bit signed integer.
        FLOAT: Single precision floating point.
        DOUBLE: Double precision floating point.
        CHAR: The first character of the value token.
        BOOLEAN: Toggle flag, or an explicit `true` / `false` literal.

    Aliases:
        - "str" → "string"
        - "int" → "integer"
        - "bool" → "boolean"
        - "character" → "char"
    """

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    SHORT = "short"
    BYTE = "byte"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    BOOLEAN = "boolean"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def integral(cls) -> tuple[ValueKind, ...]:
        """Return the kinds coerced as fixed-width signed integers."""
        return (cls.INTEGER, cls.LONG, cls.SHORT, cls.BYTE)

    @classmethod
    def floating(cls) -> tuple[ValueKind, ...]:
        """Return the kinds coerced as floating point numbers."""
        return (cls.FLOAT, cls.DOUBLE)

    @classmethod
    def from_type(cls, python_type: Any) -> ValueKind:
        """
        Resolve the value kind for a plain Python type.

        Args:
            python_type (Any): One of `str`, `int`, `float` or `bool`.

        Returns:
            ValueKind: The matching kind.

        Raises:
            ValueError: If the type has no matching kind.
        """
        types = {
            str: cls.STRING,
            int: cls.INTEGER,
            float: cls.DOUBLE,
            bool: cls.BOOLEAN,
        }
        try:
            return types[python_type]
        except (KeyError, TypeError):
            raise ValueError(
                f"No {cls.__name__} for type {python_type!r}. "
                "Pass value_kind explicitly."
            ) from None

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "integer",
            "bool": "boolean",
            "character": "char",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(str(member) for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the value kind."""
        return self.value
