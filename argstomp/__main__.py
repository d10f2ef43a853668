"""
Argstomp Option Binder

Copyright (c) 2025 The argstomp Authors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argstomp.binder import OptionBinder
from argstomp.config import load_option_table
from argstomp.console import console, error_console
from argstomp.exceptions import OptionTableError, ParseError
from argstomp.option_table import OptionTable
from argstomp.utils import setup_logging


def get_root_parser(prog: str | None = "argstomp") -> ArgumentParser:
    """
    Construct the ArgumentParser for the argstomp program.

    Program options must come before the table path; everything after it is
    handed to the binder untouched.
    """
    parser = ArgumentParser(
        prog=prog,
        description="Bind command-line tokens against an option table file.",
        epilog="Example: argstomp options.yaml --first hello -n 42",
    )
    parser.add_argument(
        "--start", type=int, default=0, help="First token index to scan."
    )
    parser.add_argument(
        "--end", type=int, default=None, help="One past the last token index to scan."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument("table", help="Path to a YAML or TOML option table.")
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to bind.")
    return parser


def render_bindings(table: OptionTable, binder: OptionBinder, args: Namespace) -> Table:
    """Build a rich table of every slot, its bound value and its binding state."""
    rendered = Table(title="argstomp", show_lines=False)
    rendered.add_column("Slot", style="bold")
    rendered.add_column("Flags")
    rendered.add_column("Kind", style="cyan")
    rendered.add_column("Value")
    rendered.add_column("State", style="dim")
    result = binder.last_result
    for descriptor in table:
        state = result.get(descriptor.dest) if result else None
        rendered.add_row(
            descriptor.dest,
            descriptor.get_flag_text(),
            str(descriptor.value_kind),
            escape(repr(getattr(args, descriptor.dest))),
            str(state.state) if state else "",
        )
    return rendered


def main(argv: Sequence[str] | None = None) -> int:
    options = get_root_parser().parse_args(argv)
    setup_logging(
        mode=options.log_mode,
        console_log_level=logging.DEBUG if options.verbose else logging.WARNING,
    )

    tokens = list(options.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    try:
        table = load_option_table(options.table)
    except (FileNotFoundError, OptionTableError) as error:
        error_console.print(f"[bold red]table error:[/] {escape(str(error))}")
        return 2

    binder = OptionBinder(table)
    try:
        args = binder.parse_args(tokens, start=options.start, end=options.end)
    except ValueError as error:
        error_console.print(f"[bold red]range error:[/] {escape(str(error))}")
        return 2
    except ParseError as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 1

    console.print(render_bindings(table, binder, args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
