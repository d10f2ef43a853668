"""
Argstomp Option Binder

Copyright (c) 2025 The argstomp Authors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .binder import OptionBinder
from .binding_types import BindingResult, BindingState, ToggleState
from .config import load_option_table
from .exceptions import (
    InvalidValueError,
    MissingRequiredOptionError,
    MissingValueError,
    OptionTableError,
    ParseError,
    StompError,
    UnwritableSlotError,
)
from .option import OptionDescriptor
from .option_table import OptionTable, not_option, option
from .value_kind import ValueKind

logger = logging.getLogger("argstomp")


__all__ = [
    "OptionBinder",
    "OptionTable",
    "OptionDescriptor",
    "ValueKind",
    "option",
    "not_option",
    "load_option_table",
    "BindingResult",
    "BindingState",
    "ToggleState",
    "StompError",
    "OptionTableError",
    "ParseError",
    "MissingValueError",
    "InvalidValueError",
    "MissingRequiredOptionError",
    "UnwritableSlotError",
]
