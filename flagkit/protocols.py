# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the collaborators a `FlagSet` depends on.

These runtime-checkable `Protocol` classes specify the expected interfaces for:
- Sources that supply the raw token sequence to parse
- Sinks that receive informational and error text

Used to keep the parser free of direct process and console access, so tests can
swap in deterministic implementations without subclassing anything.

Protocols:
- ArgumentSource: Returns the raw tokens, excluding the program's own name.
- OutputSink: Accepts `log(text)` and `error(text)`.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ArgumentSource(Protocol):
    def get_arguments(self) -> Sequence[str]: ...


@runtime_checkable
class OutputSink(Protocol):
    def log(self, text: str) -> None: ...

    def error(self, text: str) -> None: ...
