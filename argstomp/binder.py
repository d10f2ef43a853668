# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
This module implements `OptionBinder`, which binds a vector of raw argument
tokens onto the slots of a destination object as declared by an option table.

Each option is processed in table order, in four stages:
- Match: scan the selected token range for the option's `--long` or `-s`
  spelling. Only the first occurrence is honored; later occurrences of the
  same option are ignored.
- Coerce: convert the token after the match site to the option's
  `ValueKind`. A value-bearing option that is the last token of the whole
  vector fails with `MissingValueError`; an unconvertible token fails with
  `InvalidValueError`.
- Bind: write the coerced value into the destination slot and mark the
  option satisfied. Coercion completes before the write, so a failing option
  never leaves a partially written slot.
- Validate: once every option is processed, the first required option (in
  table order) that was not satisfied fails with `MissingRequiredOptionError`.

Boolean options toggle. A bare flag, either the last token or followed by a
token starting with `-`, sets the slot to the negation of its current value
and leaves the following token alone. Otherwise the following token must be
`true` or `false` (any letter case).

Options scan independently: a token consumed as the value of one option can
still be a match site for another. When two descriptors share a prefixed
name, the name belongs to the first-declared one.

Every error aborts the call immediately. Nothing is logged, retried or
skipped; presenting the error is the caller's job.

Example Usage:
    table = OptionTable()
    table.add_option("first", short_name="f", required=True)
    table.add_option("n", value_kind=ValueKind.INTEGER, default=0)
    binder = OptionBinder(table)

    args = binder.parse_args(["--first", "hello", "-n", "42"])
    # args == Namespace(first='hello', n=42)

    binder.parse(sys.argv, destination, start=2)  # skip a subcommand name
"""
from __future__ import annotations

from argparse import Namespace
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable, Sequence

from argstomp.binding_types import BindingResult, BindingState
from argstomp.coercion import coerce_bool, coerce_value
from argstomp.exceptions import (
    InvalidValueError,
    MissingRequiredOptionError,
    MissingValueError,
    UnwritableSlotError,
)
from argstomp.option import SHORT_PREFIX, OptionDescriptor
from argstomp.option_table import OptionTable
from argstomp.value_kind import ValueKind


class OptionBinder:
    """
    Binds command-line tokens to destination slots described by option descriptors.

    Destinations may be any object with writable attributes (dataclass
    instances, `argparse.Namespace`, plain objects) or any mutable mapping.

    A binder holds no state between calls apart from `last_result`, so one
    binder can serve any number of sequential parses against different
    destinations.
    """

    def __init__(self, options: OptionTable | Iterable[OptionDescriptor]) -> None:
        self._descriptors: list[OptionDescriptor] = list(options)
        self._flag_owners: dict[str, OptionDescriptor] = {}
        for descriptor in self._descriptors:
            for flag in descriptor.flags:
                self._flag_owners.setdefault(flag, descriptor)
        self._last_result: BindingResult | None = None

    @property
    def last_result(self) -> BindingResult | None:
        """Binding states of the most recent `parse` call, if any."""
        return self._last_result

    def _resolve_range(
        self, tokens: Sequence[str], start: int, end: int | None
    ) -> tuple[int, int]:
        if end is None:
            end = len(tokens)
        if not 0 <= start <= end <= len(tokens):
            raise ValueError(
                f"Invalid token range [{start}, {end}) for {len(tokens)} tokens"
            )
        return start, end

    def _find_match_site(
        self, descriptor: OptionDescriptor, tokens: Sequence[str], start: int, end: int
    ) -> int | None:
        """Return the index of the first token naming `descriptor`, if any."""
        for i in range(start, end):
            token = tokens[i]
            if token in descriptor.flags and self._flag_owners[token] is descriptor:
                return i
        return None

    def _read_slot(self, destination: Any, descriptor: OptionDescriptor) -> Any:
        if isinstance(destination, Mapping):
            return destination.get(descriptor.dest, descriptor.default)
        return getattr(destination, descriptor.dest, descriptor.default)

    def _write_slot(
        self, destination: Any, descriptor: OptionDescriptor, value: Any
    ) -> None:
        if isinstance(destination, Mapping) and not isinstance(
            destination, MutableMapping
        ):
            raise UnwritableSlotError(descriptor.long_name, "mapping is read-only")
        try:
            if isinstance(destination, MutableMapping):
                destination[descriptor.dest] = value
            else:
                setattr(destination, descriptor.dest, value)
        except (AttributeError, TypeError) as error:
            raise UnwritableSlotError(descriptor.long_name, str(error)) from error

    def _coerce_token(self, descriptor: OptionDescriptor, raw_token: str) -> Any:
        try:
            if descriptor.is_boolean:
                return coerce_bool(raw_token)
            return coerce_value(raw_token, descriptor.value_kind)
        except ValueError as error:
            raise InvalidValueError(
                descriptor.long_name, raw_token, descriptor.value_kind
            ) from error

    def _bind_boolean(
        self,
        state: BindingState,
        tokens: Sequence[str],
        site: int,
        destination: Any,
    ) -> None:
        descriptor = state.descriptor
        is_last = site == len(tokens) - 1
        if is_last or tokens[site + 1].startswith(SHORT_PREFIX):
            current = self._read_slot(destination, descriptor)
            self._write_slot(destination, descriptor, not current)
            state.set_flipped(site)
            return
        value = self._coerce_token(descriptor, tokens[site + 1])
        self._write_slot(destination, descriptor, value)
        state.set_explicit(site)

    def _bind_value(
        self,
        state: BindingState,
        tokens: Sequence[str],
        site: int,
        destination: Any,
    ) -> None:
        descriptor = state.descriptor
        if site == len(tokens) - 1:
            raise MissingValueError(descriptor.long_name)
        value = self._coerce_token(descriptor, tokens[site + 1])
        self._write_slot(destination, descriptor, value)
        state.set_explicit(site)

    def _validate_required(self, result: BindingResult) -> None:
        missing = result.unsatisfied_required()
        if missing:
            raise MissingRequiredOptionError(missing[0].long_name)

    def parse(
        self,
        tokens: Sequence[str],
        destination: Any,
        start: int = 0,
        end: int | None = None,
    ) -> None:
        """
        Bind `tokens[start:end]` onto `destination`.

        Value tokens and end-of-input checks refer to the whole vector, so the
        value of an option at the last index of the range may come from just
        past the range.

        Args:
            tokens (Sequence[str]): The raw argument list.
            destination (Any): Object or mutable mapping whose slots are written.
            start (int): First index of the range to scan.
            end (int | None): One past the last index to scan; defaults to the end.

        Raises:
            ValueError: If the range does not fit the token vector.
            MissingValueError: If a value-bearing option is the last token.
            InvalidValueError: If a value token cannot be coerced.
            UnwritableSlotError: If a destination slot cannot be written.
            MissingRequiredOptionError: If a required option is not satisfied.
        """
        start, end = self._resolve_range(tokens, start, end)
        result = BindingResult.for_options(self._descriptors)
        self._last_result = result

        for state in result:
            descriptor = state.descriptor
            site = self._find_match_site(descriptor, tokens, start, end)
            if site is None:
                continue
            if descriptor.value_kind == ValueKind.BOOLEAN:
                self._bind_boolean(state, tokens, site, destination)
            else:
                self._bind_value(state, tokens, site, destination)

        self._validate_required(result)

    def parse_args(
        self,
        tokens: Sequence[str] | None = None,
        start: int = 0,
        end: int | None = None,
    ) -> Namespace:
        """
        Bind tokens onto a fresh `Namespace` seeded with descriptor defaults.

        Returns:
            Namespace: The populated destination.
        """
        if tokens is None:
            tokens = []
        destination = Namespace(
            **{descriptor.dest: descriptor.default for descriptor in self._descriptors}
        )
        self.parse(tokens, destination, start=start, end=end)
        return destination

    def __str__(self) -> str:
        required = sum(descriptor.required for descriptor in self._descriptors)
        return (
            f"OptionBinder(options={len(self._descriptors)}, "
            f"flags={len(self._flag_owners)}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
