# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
Contains value coercion utilities for argstomp binding.

Every function converts one raw value token into the Python value for a
`ValueKind` or raises `ValueError`. The binder turns that `ValueError` into an
`InvalidValueError` carrying the option name, the raw token and the kind.

Accepted literal forms:
- Integer kinds: ASCII `[+-]?[0-9]+`, base 10, within the signed width of the
  kind (BYTE 8, SHORT 16, INTEGER 32, LONG 64 bits).
- Floating kinds: ASCII `[+-]?[0-9]+(.[0-9]+)?([eE][+-]?[0-9]+)?`. No
  whitespace, `inf`, `nan`, hex or digit separators. FLOAT values are rounded
  to single precision and must stay finite there; DOUBLE values must be finite.
- BOOLEAN: `true` or `false`, case-insensitive.
- CHAR: the first character of a non-empty token.
- STRING: the token, verbatim.

Functions:
- coerce_integer: Convert a token to a range-checked integer.
- coerce_floating: Convert a token to a float of the kind's precision.
- coerce_bool: Convert a `true` / `false` literal to a boolean.
- coerce_char: Take the first character of a token.
- coerce_value: Dispatch on `ValueKind`.
- validate_default: Check a declared default against its kind.
"""
import math
import re
import struct
from typing import Any

from argstomp.value_kind import ValueKind

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOATING_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")

INTEGER_BITS: dict[ValueKind, int] = {
    ValueKind.BYTE: 8,
    ValueKind.SHORT: 16,
    ValueKind.INTEGER: 32,
    ValueKind.LONG: 64,
}


def integer_bounds(value_kind: ValueKind) -> tuple[int, int]:
    """Return the inclusive (min, max) range of an integer kind."""
    bits = INTEGER_BITS[value_kind]
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def coerce_integer(value: str, value_kind: ValueKind) -> int:
    """
    Convert a base-10 token to an integer of the kind's signed width.

    Args:
        value (str): The raw token.
        value_kind (ValueKind): One of INTEGER, LONG, SHORT or BYTE.

    Returns:
        int: The parsed integer.

    Raises:
        ValueError: If the token is not a base-10 integer or is out of range.
    """
    if not INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a base-10 integer")
    number = int(value, 10)
    lower, upper = integer_bounds(value_kind)
    if not lower <= number <= upper:
        raise ValueError(f"{number} is out of range for {value_kind} [{lower}, {upper}]")
    return number


def to_single_precision(number: float) -> float:
    """Round a float to the nearest IEEE-754 single precision value."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        raise ValueError(f"{number} is out of range for {ValueKind.FLOAT}") from None


def coerce_floating(value: str, value_kind: ValueKind) -> float:
    """
    Convert a decimal or exponential token to a float.

    Args:
        value (str): The raw token.
        value_kind (ValueKind): FLOAT or DOUBLE.

    Returns:
        float: The parsed number, rounded to single precision for FLOAT.

    Raises:
        ValueError: If the literal form is not accepted or the value overflows.
    """
    if not FLOATING_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a decimal number")
    number = float(value)
    if value_kind == ValueKind.FLOAT:
        number = to_single_precision(number)
    if math.isinf(number):
        raise ValueError(f"'{value}' is out of range for {value_kind}")
    return number


def coerce_bool(value: str) -> bool:
    """
    Convert a `true` / `false` literal to a boolean.

    Only those two words are accepted, in any letter case.

    Args:
        value (str): The raw token.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: For any other literal.
    """
    normalized = value.lower()
    if normalized == "true":
        return True
    elif normalized == "false":
        return False
    raise ValueError(f"'{value}' is not 'true' or 'false'")


def coerce_char(value: str) -> str:
    """Return the first character of a non-empty token."""
    if not value:
        raise ValueError("An empty token has no first character")
    return value[0]


def coerce_value(value: str, value_kind: ValueKind) -> Any:
    """
    Convert a raw token to the Python value for a value kind.

    Args:
        value (str): The raw token following a match site.
        value_kind (ValueKind): The option's declared kind.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails.
    """
    if value_kind == ValueKind.STRING:
        return value
    if value_kind in ValueKind.integral():
        return coerce_integer(value, value_kind)
    if value_kind in ValueKind.floating():
        return coerce_floating(value, value_kind)
    if value_kind == ValueKind.CHAR:
        return coerce_char(value)
    if value_kind == ValueKind.BOOLEAN:
        return coerce_bool(value)
    raise ValueError(f"Unsupported value kind: {value_kind!r}")


def validate_default(default: Any, value_kind: ValueKind) -> None:
    """
    Check that a declared default is a valid value of its kind.

    `None` is always accepted and means the slot starts unset.

    Raises:
        ValueError: If the default does not fit the kind.
    """
    if default is None:
        return
    if value_kind == ValueKind.BOOLEAN:
        if not isinstance(default, bool):
            raise ValueError(f"expected a bool, got {type(default).__name__}")
    elif value_kind in ValueKind.integral():
        if isinstance(default, bool) or not isinstance(default, int):
            raise ValueError(f"expected an int, got {type(default).__name__}")
        lower, upper = integer_bounds(value_kind)
        if not lower <= default <= upper:
            raise ValueError(f"{default} is out of range for {value_kind}")
    elif value_kind in ValueKind.floating():
        if isinstance(default, bool) or not isinstance(default, (int, float)):
            raise ValueError(f"expected a float, got {type(default).__name__}")
    elif value_kind == ValueKind.CHAR:
        if not isinstance(default, str) or len(default) != 1:
            raise ValueError(f"expected a single character, got {default!r}")
    elif not isinstance(default, str):
        raise ValueError(f"expected a str, got {type(default).__name__}")
