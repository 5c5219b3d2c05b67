# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagSet`, the registry of declared flags and the
token-consumption state machine that applies a command line to them.

A `FlagSet` owns every `Flag` declared through its factories, keeps a separate
alias → name lookup table, and enforces that no name or alias is used twice.
Parsing walks the tokens strictly left to right:

- `--` is consumed and stops flag interpretation.
- A token that does not start with `-` (or is exactly `-`) stops parsing
  without being consumed; flags must come first.
- `-h` / `--help` stops parsing and requests help, wherever it appears.
- `--name`, `-name`, `-a`, each optionally followed by `=value`, resolve to a
  flag (aliases first, then names). Non-boolean flags take the inline value or
  the next token, provided it does not itself start with `-`.

Parsing stops at the first error. Flags applied before the error keep their new
values; a later parse resets everything before it starts.

Public Interface:
- `declare_boolean/declare_string/declare_number/declare_string_list(...)`
- `declare(flag_type, ...)`: Generic factory keyed by `FlagType`.
- `parse(args)`: Returns a `ParseResult` (applied / help requested / failed).
- `parse_or_raise(args)`: Raises `HelpSignal` or `FlagParseError` instead.
- `reset()`, `format_help()`, `render_help()`, `get()`, `as_dict()`, `to_namespace()`.

Example Usage:
    flags = FlagSet("server")
    port = flags.declare_number("port", "Port to bind", alias="p", default=8080)
    verbose = flags.declare_boolean("verbose", "Verbose output", alias="v")

    result = flags.parse(["-v", "--port=9090", "serve"])
    # result.outcome is ParseOutcome.APPLIED
    # port.value == 9090.0, verbose.value is True, result.remaining == ["serve"]
"""
from __future__ import annotations

import math
from argparse import Namespace
from collections import deque
from typing import Any, Iterator, Sequence

from flagkit.exceptions import FlagDefinitionError, FlagParseError
from flagkit.logger import logger
from flagkit.parser.flag import HELP_IDENTIFIERS, Flag
from flagkit.parser.flag_type import FlagType
from flagkit.parser.help import flag_sort_key, format_help
from flagkit.parser.parser_types import ParseOutcome, ParseResult, TokenStep
from flagkit.parser.values import make_value
from flagkit.protocols import ArgumentSource, OutputSink
from flagkit.providers import ConsoleOutputSink, ProcessArgumentSource
from flagkit.signals import HelpSignal
from flagkit.utils import get_program_name

TERMINATOR = "--"


def _is_number_default(default: Any) -> bool:
    if not isinstance(default, (int, float)) or isinstance(default, bool):
        return False
    try:
        return not math.isnan(float(default))
    except OverflowError:
        return False


class FlagSet:
    """
    Registry of typed command-line flags and the parser that fills them in.

    Not safe for concurrent `parse`/`reset` calls; callers sharing one
    instance across threads must serialize access.
    """

    def __init__(
        self,
        program: str | None = None,
        argument_source: ArgumentSource | None = None,
        output: OutputSink | None = None,
    ) -> None:
        self.program: str = program or get_program_name()
        self.argument_source: ArgumentSource = argument_source or ProcessArgumentSource()
        self.output: OutputSink = output or ConsoleOutputSink()
        self._flags: dict[str, Flag] = {}
        self._aliases: dict[str, str] = {}
        self._is_parsed: bool = False
        self._pending: deque[str] = deque()
        self._remaining: list[str] = []

    def _register_flag(self, flag: Flag) -> None:
        if flag.name in self._flags or flag.name in self._aliases:
            raise FlagDefinitionError(
                f"Flag name or alias '{flag.name}' is already registered."
            )
        if flag.alias is not None:
            if flag.alias in self._flags or flag.alias in self._aliases:
                raise FlagDefinitionError(
                    f"Alias '{flag.alias}' (for flag '{flag.name}') is already "
                    "registered as a name or alias."
                )
            self._aliases[flag.alias] = flag.name
        self._flags[flag.name] = flag
        logger.debug(
            "Registered flag '%s' (%s, alias=%s) on '%s'",
            flag.name,
            flag.type_name(),
            flag.alias,
            self.program,
        )

    def _validate_default(self, flag_type: FlagType, default: Any, name: str) -> None:
        if default is None:
            return
        if flag_type is FlagType.BOOLEAN:
            valid = isinstance(default, bool)
        elif flag_type is FlagType.STRING:
            valid = isinstance(default, str)
        elif flag_type is FlagType.NUMBER:
            valid = _is_number_default(default)
        else:
            valid = isinstance(default, (list, tuple)) and all(
                isinstance(item, str) for item in default
            )
        if not valid:
            raise FlagDefinitionError(
                f"Default value {default!r} for '{name}' is not a valid {flag_type} value."
            )

    def declare(
        self,
        flag_type: FlagType | str,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: Any = None,
    ) -> Flag:
        """
        Declare a new flag of any supported type.

        Args:
            flag_type (FlagType | str): The value kind, or one of its aliases.
            name (str): Long name, matched by `--name` and `-name`.
            description (str): Help text shown in usage output.
            alias (str | None): Optional single-character short form.
            default (Any): Initial value; the type's zero value when None.

        Returns:
            Flag: The registered flag, whose `.value` updates on each parse.

        Raises:
            FlagDefinitionError: If the type, name, alias or default is invalid,
                or the name/alias collides with an existing one.
        """
        if not isinstance(flag_type, FlagType):
            try:
                flag_type = FlagType(flag_type)
            except ValueError as error:
                raise FlagDefinitionError(str(error)) from error
        self._validate_default(flag_type, default, name)
        flag = Flag(name, make_value(flag_type, default), description, alias)
        self._register_flag(flag)
        return flag

    def declare_boolean(
        self,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: bool = False,
    ) -> Flag:
        return self.declare(FlagType.BOOLEAN, name, description, alias, default)

    def declare_string(
        self,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: str = "",
    ) -> Flag:
        return self.declare(FlagType.STRING, name, description, alias, default)

    def declare_number(
        self,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: float = 0,
    ) -> Flag:
        return self.declare(FlagType.NUMBER, name, description, alias, default)

    def declare_string_list(
        self,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: Sequence[str] | None = None,
    ) -> Flag:
        return self.declare(FlagType.STRING_LIST, name, description, alias, default)

    def reset(self) -> None:
        """Restore every flag to its default and forget the last parse."""
        for flag in self._flags.values():
            flag.reset_to_default()
        self._is_parsed = False
        self._pending.clear()
        self._remaining = []

    def _parse_one(self) -> TokenStep:
        token = self._pending[0]

        if token == TERMINATOR:
            self._pending.popleft()
            return TokenStep.TERMINATOR

        if not token.startswith("-") or token == "-":
            return TokenStep.NOT_A_FLAG

        self._pending.popleft()
        identifier = token[2:] if token.startswith("--") else token[1:]
        identifier, separator, inline = identifier.partition("=")
        inline_value = inline if separator else None

        if not identifier or identifier.startswith("-"):
            raise FlagParseError("invalid flag syntax", offending_value=token)

        if identifier in HELP_IDENTIFIERS:
            logger.debug("Help requested via '%s'", token)
            raise HelpSignal()

        flag = self.get(identifier)
        if flag is None:
            raise FlagParseError("unknown flag", identifier)

        if flag.expects_explicit_value():
            if inline_value is None:
                if not self._pending or self._pending[0].startswith("-"):
                    raise FlagParseError("requires a value", flag.name)
                inline_value = self._pending.popleft()
            flag.apply_explicit(inline_value)
        elif inline_value is not None:
            flag.apply_explicit(inline_value)
        else:
            flag.apply_implicit()

        logger.debug("Applied flag '%s' = %r", flag.name, flag.value)
        return TokenStep.FLAG_APPLIED

    def parse_or_raise(self, args: Sequence[str] | None = None) -> list[str]:
        """
        Apply `args` (or the argument source's tokens) to the declared flags.

        Returns:
            list[str]: Tokens left unconsumed (after `--`, or from the first
                non-flag token on).

        Raises:
            HelpSignal: If `-h` or `--help` was encountered.
            FlagParseError: On the first malformed, unknown or invalid flag.
        """
        if self._is_parsed or any(flag.is_set for flag in self._flags.values()):
            self.reset()

        tokens = self.argument_source.get_arguments() if args is None else args
        self._pending = deque(tokens)
        logger.debug("Parsing %d token(s) for '%s'", len(self._pending), self.program)

        try:
            while self._pending:
                step = self._parse_one()
                if step is not TokenStep.FLAG_APPLIED:
                    logger.debug(
                        "Stopped flag parsing at %s with %d token(s) left",
                        step.value,
                        len(self._pending),
                    )
                    break
        except FlagParseError as error:
            self._is_parsed = True
            logger.debug("Parsing failed: %s", error)
            raise
        finally:
            self._remaining = list(self._pending)
            self._pending.clear()

        self._is_parsed = True
        return list(self._remaining)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Apply `args` (or the argument source's tokens) and report how it ended.

        Unlike `parse_or_raise`, neither a help request nor a parse error is
        raised; both are reported through `ParseResult.outcome`.
        """
        try:
            remaining = self.parse_or_raise(args)
        except HelpSignal:
            return ParseResult(ParseOutcome.HELP_REQUESTED, remaining=self.remaining_args)
        except FlagParseError as error:
            return ParseResult(
                ParseOutcome.FAILED, error=error, remaining=self.remaining_args
            )
        return ParseResult(ParseOutcome.APPLIED, remaining=remaining)

    def get(self, identifier: str) -> Flag | None:
        """Look up a flag by alias first, then by name."""
        name = self._aliases.get(identifier, identifier)
        return self._flags.get(name)

    @property
    def flags(self) -> list[Flag]:
        """Declared flags, in declaration order."""
        return list(self._flags.values())

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    @property
    def is_parsed(self) -> bool:
        return self._is_parsed

    @property
    def remaining_args(self) -> list[str]:
        return list(self._remaining)

    def as_dict(self) -> dict[str, Any]:
        return {name: flag.value for name, flag in self._flags.items()}

    def to_namespace(self) -> Namespace:
        return Namespace(
            **{name.replace("-", "_"): value for name, value in self.as_dict().items()}
        )

    def format_help(self) -> str:
        return format_help(self)

    def render_help(self) -> None:
        """Send the usage text to the output sink."""
        self.output.log(self.format_help())

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.get(identifier) is not None

    def __iter__(self) -> Iterator[Flag]:
        return iter(sorted(self._flags.values(), key=flag_sort_key))

    def __len__(self) -> int:
        return len(self._flags)

    def __str__(self) -> str:
        return (
            f"FlagSet(program='{self.program}', flags={len(self._flags)}, "
            f"aliases={len(self._aliases)}, parsed={self._is_parsed})"
        )

    def __repr__(self) -> str:
        return str(self)
