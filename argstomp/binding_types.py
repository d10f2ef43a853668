# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""
Per-call binding state for `OptionBinder`.

Contents:
- `ToggleState`: Where an option stands after the match and coerce steps.
  Boolean options reach `SEEN_FLIPPED` (bare flag) or `SEEN_EXPLICIT` (literal
  value); value-bearing options go straight to `SEEN_EXPLICIT`.
- `BindingState`: Tracks one descriptor, its match site and its state.
- `BindingResult`: The ordered collection of states for one `parse` call,
  consulted by the required-option validation.

A fresh `BindingResult` is built for every call, so satisfaction never leaks
from one call into the next.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from argstomp.option import OptionDescriptor


class ToggleState(Enum):
    """Binding progress of one option within a single parse call."""

    NOT_SEEN = "not_seen"
    SEEN_FLIPPED = "seen_flipped"
    SEEN_EXPLICIT = "seen_explicit"

    def __str__(self) -> str:
        return self.value


@dataclass
class BindingState:
    """Tracks a descriptor and whether it has been satisfied."""

    descriptor: OptionDescriptor
    state: ToggleState = ToggleState.NOT_SEEN
    match_site: int | None = None

    @property
    def satisfied(self) -> bool:
        return self.state != ToggleState.NOT_SEEN

    def set_flipped(self, position: int) -> None:
        """Mark the option as satisfied by a bare boolean flag."""
        self.state = ToggleState.SEEN_FLIPPED
        self.match_site = position

    def set_explicit(self, position: int) -> None:
        """Mark the option as satisfied by a value token."""
        self.state = ToggleState.SEEN_EXPLICIT
        self.match_site = position


@dataclass
class BindingResult:
    """Ordered binding states for a single parse call."""

    states: list[BindingState] = field(default_factory=list)

    @classmethod
    def for_options(cls, descriptors: Iterable[OptionDescriptor]) -> BindingResult:
        return cls([BindingState(descriptor) for descriptor in descriptors])

    def __iter__(self) -> Iterator[BindingState]:
        return iter(self.states)

    def get(self, dest: str) -> BindingState | None:
        """Return the first state whose descriptor writes `dest`, if any."""
        return next((s for s in self.states if s.descriptor.dest == dest), None)

    def is_satisfied(self, dest: str) -> bool:
        state = self.get(dest)
        return state is not None and state.satisfied

    def unsatisfied_required(self) -> list[OptionDescriptor]:
        """Return required descriptors without a binding, in table order."""
        return [
            state.descriptor
            for state in self.states
            if state.descriptor.required and not state.satisfied
        ]
