# Argstomp Option Binder — (c) 2025 The argstomp Authors — MIT Licensed
"""Global logger instance for argstomp."""
import logging

logger: logging.Logger = logging.getLogger("argstomp")
