# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Flag`, a named, optionally aliased, typed command-line setting.

A `Flag` wraps a `FlagValue` with bookkeeping: whether it was explicitly set
during the current parse, and the default rendered as a string at construction
time (used both to reset the value and to display it in help output).

Flags are created through the `FlagSet.declare_*` factories and are owned by
exactly one `FlagSet`.
"""
from __future__ import annotations

from typing import Any

from flagkit.exceptions import FlagDefinitionError, FlagParseError, ValueParseError
from flagkit.parser.flag_type import FlagType
from flagkit.parser.values import FlagValue

HELP_IDENTIFIERS = frozenset({"h", "help"})


class Flag:
    """
    A declared flag and its current value.

    Attributes:
        name (str): Long name, matched by `--name` and `-name`.
        description (str): Help text.
        alias (str | None): Single-character short form, matched by `-a`.
    """

    def __init__(
        self,
        name: str,
        value: FlagValue,
        description: str = "",
        alias: str | None = None,
    ) -> None:
        self._validate_name(name)
        if alias is not None:
            self._validate_alias(name, alias)
        self.name: str = name
        self.description: str = description
        self.alias: str | None = alias
        self._value: FlagValue = value
        self._default_string: str = value.as_string()
        self._is_set: bool = False

    @staticmethod
    def _validate_name(name: str) -> None:
        if not isinstance(name, str) or not name:
            raise FlagDefinitionError("Flag name must be a non-empty string.")
        if name.startswith("-"):
            raise FlagDefinitionError(
                f"Flag name '{name}' must not start with '-'; declare it without dashes."
            )
        if "=" in name or any(char.isspace() for char in name):
            raise FlagDefinitionError(
                f"Flag name '{name}' must not contain '=' or whitespace."
            )
        if name in HELP_IDENTIFIERS:
            raise FlagDefinitionError(
                f"Flag name '{name}' is reserved for the built-in help flag."
            )

    @staticmethod
    def _validate_alias(name: str, alias: str) -> None:
        if not isinstance(alias, str) or len(alias) != 1 or alias in ("-", "="):
            raise FlagDefinitionError(
                f"Alias for flag '{name}' must be a single character and not "
                f"'-' or '=', got {alias!r}."
            )
        if alias in HELP_IDENTIFIERS:
            raise FlagDefinitionError(
                f"Alias '{alias}' for flag '{name}' is reserved for the built-in help flag."
            )
        if alias == name:
            raise FlagDefinitionError(
                f"Alias '{alias}' for flag '{name}' must differ from the flag name."
            )

    def apply_explicit(self, raw: str) -> None:
        """Coerce and store `raw`, marking the flag as set."""
        try:
            self._value.set(raw)
        except ValueParseError as error:
            raise FlagParseError(error.reason, self.name, error.raw_value) from error
        self._is_set = True

    def apply_implicit(self) -> None:
        """Set a boolean flag to `True` without an explicit value."""
        if self._value.flag_type is not FlagType.BOOLEAN:
            raise FlagParseError("requires an explicit value", self.name)
        self._value.set("true")
        self._is_set = True

    def reset_to_default(self) -> None:
        self._value.reset_to_default(self._default_string)
        self._is_set = False

    @property
    def value(self) -> Any:
        return self._value.get()

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def default_as_string(self) -> str:
        return self._default_string

    @property
    def flag_type(self) -> FlagType:
        return self._value.flag_type

    def as_string(self) -> str:
        return self._value.as_string()

    def type_name(self) -> str:
        return self._value.type_name()

    def expects_explicit_value(self) -> bool:
        return self._value.expects_explicit_value()

    def __str__(self) -> str:
        alias = f", alias='{self.alias}'" if self.alias else ""
        return (
            f"Flag(name='{self.name}'{alias}, type={self.type_name()}, "
            f"value={self.value!r}, is_set={self._is_set})"
        )

    def __repr__(self) -> str:
        return str(self)
