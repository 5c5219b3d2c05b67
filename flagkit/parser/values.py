# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed value holders backing each declared `Flag`.

Every flag owns exactly one `FlagValue`. The value holder knows how to coerce a
raw command-line string into its type, how to render itself back to a string,
whether a bare flag needs an explicit value, and how to restore its
construction-time default.

Contents:
- `FlagValue`: Abstract base for the closed set of value kinds.
- `BooleanValue`: `true`/`1` and `false`/`0`, case-insensitive.
- `StringValue`: Any string, stored verbatim.
- `NumberValue`: Floating-point numbers; `NaN` is rejected.
- `StringListValue`: Appends on every `set`; resets to an immutable default.

A failed `set` raises `ValueParseError` and leaves the current value untouched.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, TypeVar

from flagkit.exceptions import ValueParseError
from flagkit.parser.flag_type import FlagType

T = TypeVar("T")


class FlagValue(ABC, Generic[T]):
    """Abstract holder for the current value of a single flag."""

    flag_type: FlagType

    @abstractmethod
    def set(self, raw: str) -> None:
        """Coerce `raw` and store it, or raise `ValueParseError`."""

    @abstractmethod
    def get(self) -> T:
        """Return the current value."""

    @abstractmethod
    def as_string(self) -> str:
        """Return the canonical textual rendering of the current value."""

    def type_name(self) -> str:
        return self.flag_type.value

    def expects_explicit_value(self) -> bool:
        return True

    def reset_to_default(self, default_string: str) -> None:
        """Restore the construction-time default from its rendered string."""
        self.set(default_string)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"


class BooleanValue(FlagValue[bool]):
    flag_type = FlagType.BOOLEAN

    def __init__(self, default: bool = False) -> None:
        self._value: bool = default

    def set(self, raw: str) -> None:
        lowered = raw.lower()
        if lowered in ("true", "1"):
            self._value = True
        elif lowered in ("false", "0"):
            self._value = False
        else:
            raise ValueParseError("invalid boolean value", raw)

    def get(self) -> bool:
        return self._value

    def as_string(self) -> str:
        return "true" if self._value else "false"

    def expects_explicit_value(self) -> bool:
        return False


class StringValue(FlagValue[str]):
    flag_type = FlagType.STRING

    def __init__(self, default: str = "") -> None:
        self._value: str = default

    def set(self, raw: str) -> None:
        self._value = raw

    def get(self) -> str:
        return self._value

    def as_string(self) -> str:
        return self._value


def format_number(value: float) -> str:
    """Render integral floats without a fractional part (`8080`, not `8080.0`)."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


class NumberValue(FlagValue[float]):
    flag_type = FlagType.NUMBER

    def __init__(self, default: float = 0) -> None:
        self._value: float = float(default)

    def set(self, raw: str) -> None:
        # float() also accepts "1_000" and surrounding whitespace
        if "_" in raw or raw != raw.strip():
            raise ValueParseError("invalid number", raw)
        try:
            number = float(raw)
        except ValueError:
            raise ValueParseError("invalid number", raw) from None
        if math.isnan(number):
            raise ValueParseError("invalid number", raw)
        self._value = number

    def get(self) -> float:
        return self._value

    def as_string(self) -> str:
        return format_number(self._value)


class StringListValue(FlagValue[list[str]]):
    """
    Accumulates one string per occurrence of the flag.

    The default sequence is frozen as a tuple at construction so that
    `reset_to_default` restores it exactly, no matter what was appended since.
    """

    flag_type = FlagType.STRING_LIST

    def __init__(self, default: Iterable[str] | None = None) -> None:
        self._initial: tuple[str, ...] = tuple(default or ())
        self._value: list[str] = list(self._initial)

    def set(self, raw: str) -> None:
        self._value.append(raw)

    def get(self) -> list[str]:
        return list(self._value)

    def as_string(self) -> str:
        return ", ".join(self._value)

    @property
    def initial(self) -> tuple[str, ...]:
        return self._initial

    def reset_to_default(self, default_string: str) -> None:
        self._value = list(self._initial)


def make_value(flag_type: FlagType, default: Any = None) -> FlagValue:
    """Build the value holder for `flag_type`, using the type's zero value when
    `default` is None."""
    if flag_type is FlagType.BOOLEAN:
        return BooleanValue(False if default is None else default)
    elif flag_type is FlagType.STRING:
        return StringValue("" if default is None else default)
    elif flag_type is FlagType.NUMBER:
        return NumberValue(0 if default is None else default)
    elif flag_type is FlagType.STRING_LIST:
        return StringListValue(default)
    raise TypeError(f"Unsupported flag type: {flag_type!r}")
