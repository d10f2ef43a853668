# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
This module implements `OptionTable`, the ordered, caller-built collection of
`OptionDescriptor` objects consumed by `OptionBinder`.

The table is where every construction-time contract is enforced, so the binder
can trust what it is handed:
- Long names default to the slot identifier when not given explicitly.
- Prefixed names (`--long`, `-s`) are unique across the table.
- Destination slots are unique identifiers.
- Declared defaults are valid values of the option's kind.

Tables can be built three ways:
- Imperatively with `add_option()`.
- Declaratively from a dataclass whose fields use the `option()` and
  `not_option()` helpers (`OptionTable.from_dataclass()`).
- From a YAML or TOML file (see `argstomp.config.load_option_table`).

Example Usage:
    table = OptionTable()
    table.add_option("first_word", long_name="first", short_name="f", required=True)
    table.add_option("num", short_name="n", value_kind=int)
    table.add_option("bool", short_name="b", value_kind="boolean", default=True)

    @dataclass
    class Args:
        first_word: str = option(long_name="first", short_name="f", required=True)
        num: int = option(short_name="n", default=0)
        not_an_arg: int = not_option(default=0)

    table = OptionTable.from_dataclass(Args)
"""
from __future__ import annotations

import dataclasses
import types
from argparse import Namespace
from dataclasses import MISSING, dataclass
from typing import Any, Iterator, Union, get_args, get_origin, get_type_hints

from argstomp.coercion import validate_default
from argstomp.exceptions import OptionTableError
from argstomp.logger import logger
from argstomp.option import OptionDescriptor
from argstomp.value_kind import ValueKind

OPTION_METADATA_KEY = "argstomp.option"
NOT_OPTION_METADATA_KEY = "argstomp.not_option"


@dataclass(frozen=True)
class OptionSpec:
    """Option settings attached to a dataclass field by `option()`."""

    long_name: str | None = None
    short_name: str | None = None
    required: bool = False
    value_kind: ValueKind | str | type | None = None
    help: str = ""


def option(
    *,
    long_name: str | None = None,
    short_name: str | None = None,
    required: bool = False,
    value_kind: ValueKind | str | type | None = None,
    help: str = "",
    default: Any = MISSING,
    **field_kwargs: Any,
) -> Any:
    """
    Declare a dataclass field as a command-line option.

    Args:
        long_name (str | None): Long name; defaults to the field name.
        short_name (str | None): Optional single-character short name.
        required (bool): Whether the option must be given.
        value_kind (ValueKind | str | type | None): Declared kind; inferred from
            the field annotation when omitted.
        help (str): Free-form description.
        default (Any): The field default, also the option's default.
        **field_kwargs: Forwarded to `dataclasses.field()`.
    """
    spec = OptionSpec(
        long_name=long_name,
        short_name=short_name,
        required=required,
        value_kind=value_kind,
        help=help,
    )
    metadata = {**field_kwargs.pop("metadata", {}), OPTION_METADATA_KEY: spec}
    return dataclasses.field(default=default, metadata=metadata, **field_kwargs)


def not_option(*, default: Any = MISSING, **field_kwargs: Any) -> Any:
    """Declare a dataclass field that is deliberately not a command-line option."""
    metadata = {**field_kwargs.pop("metadata", {}), NOT_OPTION_METADATA_KEY: True}
    return dataclasses.field(default=default, metadata=metadata, **field_kwargs)


def _unwrap_optional(annotation: Any) -> Any:
    if isinstance(annotation, types.UnionType) or get_origin(annotation) is Union:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


class OptionTable:
    """
    Ordered collection of option descriptors.

    Iteration yields descriptors in declaration order, which is also the order
    the binder processes them and the order required options are validated.

    Features:
    - Long-name resolution from the slot identifier.
    - Uniqueness checks for destinations and prefixed names.
    - Kind resolution from `ValueKind`, string aliases or Python types.
    - Default validation per kind.
    - Fresh `Namespace` destinations seeded with defaults.
    """

    def __init__(self, descriptors: list[OptionDescriptor] | None = None) -> None:
        self._descriptors: list[OptionDescriptor] = []
        self._flag_map: dict[str, OptionDescriptor] = {}
        self._dest_map: dict[str, OptionDescriptor] = {}
        for descriptor in descriptors or []:
            self.add_descriptor(descriptor)

    def _resolve_value_kind(self, value_kind: ValueKind | str | type) -> ValueKind:
        if isinstance(value_kind, ValueKind):
            return value_kind
        try:
            if isinstance(value_kind, str):
                return ValueKind(value_kind)
            return ValueKind.from_type(value_kind)
        except ValueError as error:
            raise OptionTableError(str(error)) from error

    def _validate_dest(self, dest: str) -> None:
        if not isinstance(dest, str) or not dest.isidentifier():
            raise OptionTableError(
                f"dest must be a valid identifier (letters, digits, and underscores only), got {dest!r}"
            )
        if dest in self._dest_map:
            raise OptionTableError(f"Destination '{dest}' is already defined.")

    def _validate_names(self, long_name: str, short_name: str | None) -> None:
        if not isinstance(long_name, str) or not long_name:
            raise OptionTableError("Long name must be a non-empty string")
        if long_name.startswith("-"):
            raise OptionTableError(
                f"Long name '{long_name}' must be given without its '--' prefix"
            )
        if any(char.isspace() for char in long_name):
            raise OptionTableError(f"Long name '{long_name}' must not contain whitespace")
        if short_name:
            if not isinstance(short_name, str) or len(short_name) != 1:
                raise OptionTableError(
                    f"Short name {short_name!r} must be a single character"
                )
            if short_name == "-" or short_name.isspace():
                raise OptionTableError(f"Short name {short_name!r} is not allowed")

    def add_descriptor(self, descriptor: OptionDescriptor) -> None:
        """
        Register an already built descriptor after validating it.

        Raises:
            OptionTableError: If the descriptor breaks a table invariant.
        """
        self._validate_dest(descriptor.dest)
        self._validate_names(descriptor.long_name, descriptor.short_name)
        if not isinstance(descriptor.value_kind, ValueKind):
            raise OptionTableError(
                f"value_kind of '{descriptor.dest}' must be a ValueKind"
            )
        if not isinstance(descriptor.required, bool):
            raise OptionTableError(
                f"required must be a boolean, got {type(descriptor.required)}"
            )
        try:
            validate_default(descriptor.default, descriptor.value_kind)
        except ValueError as error:
            raise OptionTableError(
                f"Default value {descriptor.default!r} for '{descriptor.dest}' is not a "
                f"valid {descriptor.value_kind} value: {error}"
            ) from error
        for flag in descriptor.flags:
            if flag in self._flag_map:
                existing = self._flag_map[flag]
                raise OptionTableError(
                    f"Flag '{flag}' is already used by option '{existing.dest}'"
                )

        for flag in descriptor.flags:
            self._flag_map[flag] = descriptor
        self._dest_map[descriptor.dest] = descriptor
        self._descriptors.append(descriptor)
        logger.debug("Registered option %s", descriptor)

    def add_option(
        self,
        dest: str,
        *,
        long_name: str | None = None,
        short_name: str | None = None,
        required: bool = False,
        value_kind: ValueKind | str | type = ValueKind.STRING,
        default: Any = None,
        help: str = "",
    ) -> OptionDescriptor:
        """
        Define a new option for the table.

        Args:
            dest (str): Slot identifier written on the destination.
            long_name (str | None): Long name without prefix; defaults to `dest`.
            short_name (str | None): Single-character short name; None or "" for none.
            required (bool): Whether parsing fails when the option is absent.
            value_kind (ValueKind | str | type): Declared kind, alias or Python type.
            default (Any): The slot's pre-parse value.
            help (str): Free-form description.

        Returns:
            OptionDescriptor: The registered descriptor.

        Raises:
            OptionTableError: If the option breaks a table invariant.
        """
        descriptor = OptionDescriptor(
            dest=dest,
            long_name=dest if long_name is None else long_name,
            short_name=short_name or None,
            value_kind=self._resolve_value_kind(value_kind),
            required=required,
            default=default,
            help=help,
        )
        self.add_descriptor(descriptor)
        return descriptor

    @classmethod
    def from_dataclass(cls, target: Any) -> OptionTable:
        """
        Build a table from the fields of a dataclass type or instance.

        Fields declared with `option()` become options in field order. Fields
        declared with `not_option()` are skipped silently; any other field is
        skipped with a warning.

        Args:
            target (Any): A dataclass type or instance.

        Returns:
            OptionTable: The table describing the dataclass.

        Raises:
            OptionTableError: If `target` is not a dataclass or an option is invalid.
        """
        if not dataclasses.is_dataclass(target):
            raise OptionTableError(f"{target!r} is not a dataclass")
        target_type = target if isinstance(target, type) else type(target)
        try:
            hints = get_type_hints(target_type)
        except NameError as error:
            raise OptionTableError(
                f"Cannot resolve annotations of {target_type.__name__}: {error}"
            ) from error

        table = cls()
        for field in dataclasses.fields(target_type):
            spec = field.metadata.get(OPTION_METADATA_KEY)
            if spec is None:
                if not field.metadata.get(NOT_OPTION_METADATA_KEY):
                    logger.warning(
                        "Field '%s' of %s is not declared with option() or not_option(); skipping.",
                        field.name,
                        target_type.__name__,
                    )
                continue

            value_kind = spec.value_kind
            if value_kind is None:
                annotation = _unwrap_optional(hints.get(field.name))
                value_kind = table._resolve_value_kind(annotation)

            if field.default is not MISSING:
                default = field.default
            elif field.default_factory is not MISSING:
                default = field.default_factory()
            else:
                default = None

            table.add_option(
                field.name,
                long_name=spec.long_name,
                short_name=spec.short_name,
                required=spec.required,
                value_kind=value_kind,
                default=default,
                help=spec.help,
            )
        return table

    def get_option(self, dest: str) -> OptionDescriptor | None:
        """Return the descriptor for a destination slot, if defined."""
        return self._dest_map.get(dest)

    def get_by_flag(self, flag: str) -> OptionDescriptor | None:
        """Return the descriptor selected by a prefixed name such as `--first` or `-f`."""
        return self._flag_map.get(flag)

    def defaults(self) -> dict[str, Any]:
        """Return the pre-parse value of every slot."""
        return {descriptor.dest: descriptor.default for descriptor in self._descriptors}

    def namespace(self) -> Namespace:
        """Return a fresh `Namespace` destination seeded with defaults."""
        return Namespace(**self.defaults())

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert option metadata into a serializable list of dicts.

        The dicts use the same keys as config file entries, so the output can
        be written back to YAML or TOML.
        """
        return [
            {
                "dest": descriptor.dest,
                "long_name": descriptor.long_name,
                "short_name": descriptor.short_name,
                "required": descriptor.required,
                "value_kind": descriptor.value_kind.value,
                "default": descriptor.default,
                "help": descriptor.help,
            }
            for descriptor in self._descriptors
        ]

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, dest: object) -> bool:
        return dest in self._dest_map

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionTable):
            return False
        return self._descriptors == other._descriptors

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        required = sum(descriptor.required for descriptor in self._descriptors)
        return (
            f"OptionTable(options={len(self._descriptors)}, "
            f"flags={len(self._flag_map)}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
