# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by flagkit.

Definition errors surface while flags are being declared and are fatal to
program setup. Parse errors surface while tokens are being consumed and carry
enough context (flag name, offending raw value) to build a diagnostic message.

All exceptions inherit from `FlagkitError`, the base exception for the package.

Exception Hierarchy:
- FlagkitError
    ├── FlagDefinitionError
    ├── ValueParseError
    ├── FlagParseError
    └── ConfigError

"Help requested" is not an error and lives in `flagkit.signals`.
"""
from __future__ import annotations


class FlagkitError(Exception):
    """Base exception for flagkit."""


class FlagDefinitionError(FlagkitError):
    """Raised when a flag declaration is invalid or collides with an existing one."""


class ValueParseError(FlagkitError):
    """Raised when a raw string cannot be coerced to a flag's value type.

    Carries no flag-name context; `Flag` re-raises it as `FlagParseError`.
    """

    def __init__(self, reason: str, raw_value: str) -> None:
        self.reason = reason
        self.raw_value = raw_value
        super().__init__(f'{reason} (value: "{raw_value}")')


class FlagParseError(FlagkitError):
    """
    Raised when a token sequence cannot be applied to a `FlagSet`.

    Attributes:
        reason (str): Short description of what went wrong.
        flag_name (str | None): The flag (or unresolved identifier) involved, if known.
        offending_value (str | None): The raw value or token that failed, if known.
    """

    def __init__(
        self,
        reason: str,
        flag_name: str | None = None,
        offending_value: str | None = None,
    ) -> None:
        self.reason = reason
        self.flag_name = flag_name
        self.offending_value = offending_value
        message = f"Flag '{flag_name}': {reason}" if flag_name else reason
        if offending_value is not None:
            message = f'{message} (value: "{offending_value}")'
        super().__init__(message)


class ConfigError(FlagkitError):
    """Raised when a flag declaration file cannot be loaded."""
