#!/usr/bin/env python3
"""
Colored console logging for the markdown-to-pdf converter.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import threading
from colorama import init, Fore, Style

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class ConsoleLogger:
    """Prints tagged, colored messages to stdout."""

    def __init__(self, debug: bool = False):
        self.debug_enabled = debug
        self._lock = threading.Lock()

    def _emit(self, color: str, tag: str, message: str) -> None:
        with self._lock:
            print(f"{color}[{tag}]{Style.RESET_ALL} {message}")

    def debug(self, message: str) -> None:
        """Log debug message (only if debug mode is enabled)."""
        if self.debug_enabled:
            self._emit(Fore.CYAN, "DEBUG", message)

    def info(self, message: str) -> None:
        self._emit(Fore.GREEN, "INFO", message)

    def warning(self, message: str) -> None:
        self._emit(Fore.YELLOW, "WARNING", message)

    def error(self, message: str) -> None:
        self._emit(Fore.RED, "ERROR", message)

    def success(self, message: str) -> None:
        self._emit(Fore.GREEN, "OK", message)
