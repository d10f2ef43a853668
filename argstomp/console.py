# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""Global console instances for the argstomp program."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
