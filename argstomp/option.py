# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
Defines the `OptionDescriptor` dataclass, the static declaration of one
bindable option.

A descriptor names the destination slot, the long and short spellings that
select it on the command line, the value kind the following token is coerced
to, whether the option must be given, and the slot's pre-parse default.

Descriptors are immutable. They should be created through
`OptionTable.add_option()`, `OptionTable.from_dataclass()` or a config file,
all of which resolve the long name from the slot identifier when it is not
given explicitly.

Key Attributes:
- `dest`: Slot identifier on the destination (attribute name or mapping key)
- `long_name`: Matched as `--long_name`
- `short_name`: Matched as `-short_name`; empty or None means no short form
- `value_kind`: `ValueKind` deciding how the value token is coerced
- `required`: Whether parsing fails when the option is never satisfied
- `default`: The slot's pre-parse value, used to seed fresh destinations
"""
from dataclasses import dataclass
from typing import Any

from argstomp.value_kind import ValueKind

LONG_PREFIX = "--"
SHORT_PREFIX = "-"


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Represents one command-line option bound to a destination slot.

    Attributes:
        dest (str): The destination slot written by the binder.
        long_name (str): Long name, matched with a `--` prefix.
        short_name (str | None): Short name, matched with a `-` prefix.
        value_kind (ValueKind): Declared value type of the slot.
        required (bool): True if the option must be satisfied by the tokens.
        default (Any): The slot's value before parsing.
        help (str): Free-form description of the option.
    """

    dest: str
    long_name: str
    short_name: str | None = None
    value_kind: ValueKind = ValueKind.STRING
    required: bool = False
    default: Any = None
    help: str = ""

    @property
    def long_flag(self) -> str:
        """Return the prefixed long name (e.g. `--first`)."""
        return f"{LONG_PREFIX}{self.long_name}"

    @property
    def short_flag(self) -> str | None:
        """Return the prefixed short name (e.g. `-f`), or None without a short form."""
        if not self.short_name:
            return None
        return f"{SHORT_PREFIX}{self.short_name}"

    @property
    def flags(self) -> tuple[str, ...]:
        """Return every prefixed spelling of this option, long name first."""
        if self.short_flag is None:
            return (self.long_flag,)
        return (self.long_flag, self.short_flag)

    @property
    def is_boolean(self) -> bool:
        return self.value_kind == ValueKind.BOOLEAN

    def get_flag_text(self) -> str:
        """Get the flags joined for display, e.g. `--first, -f`."""
        return ", ".join(self.flags)

    def __str__(self) -> str:
        required = ", required" if self.required else ""
        return f"OptionDescriptor({self.get_flag_text()} -> {self.dest}: {self.value_kind}{required})"
