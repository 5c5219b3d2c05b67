# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Default implementations of the `ArgumentSource` and `OutputSink` protocols.

- `ProcessArgumentSource` reads `sys.argv[1:]` at call time.
- `StaticArgumentSource` replays a fixed token list.
- `ConsoleOutputSink` writes through Rich consoles: `log` to stdout and
  `error` to stderr. Markup and highlighting are disabled so help text and
  user-supplied values are printed exactly as given.
"""
from __future__ import annotations

import sys
from typing import Iterable, Sequence

from rich.console import Console

from flagkit.console import console as default_console
from flagkit.console import error_console as default_error_console


class ProcessArgumentSource:
    """Supplies the current process arguments, minus the program name."""

    def get_arguments(self) -> Sequence[str]:
        return list(sys.argv[1:])


class StaticArgumentSource:
    """Supplies a fixed token list."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: tuple[str, ...] = tuple(tokens)

    def get_arguments(self) -> Sequence[str]:
        return list(self._tokens)


class ConsoleOutputSink:
    """Writes informational text to stdout and errors to stderr via Rich."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console

    def log(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def error(self, text: str) -> None:
        self.error_console.print(
            text, markup=False, highlight=False, soft_wrap=True, style="bold red"
        )
