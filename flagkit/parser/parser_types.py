# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Outcome types for `FlagSet` parsing.

Contents:
- `ParseOutcome`: The three ways a parse can end: applied, help requested, or failed.
- `ParseResult`: The outcome, the error when failed, and the unconsumed tokens.
- `TokenStep`: What a single step of the token state machine did.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from flagkit.exceptions import FlagParseError
from flagkit.signals import HelpSignal


class ParseOutcome(Enum):
    APPLIED = "applied"
    HELP_REQUESTED = "help_requested"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class TokenStep(Enum):
    FLAG_APPLIED = "flag_applied"
    TERMINATOR = "terminator"
    NOT_A_FLAG = "not_a_flag"


@dataclass(frozen=True)
class ParseResult:
    """
    The result of `FlagSet.parse`.

    Attributes:
        outcome (ParseOutcome): How parsing ended.
        error (FlagParseError | None): The first error, when `outcome` is FAILED.
        remaining (list[str]): Tokens left unconsumed when parsing stopped.
    """

    outcome: ParseOutcome
    error: FlagParseError | None = None
    remaining: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is ParseOutcome.APPLIED

    @property
    def help_requested(self) -> bool:
        return self.outcome is ParseOutcome.HELP_REQUESTED

    def raise_for_outcome(self) -> None:
        """Re-raise the signal or error this result stands for, if any."""
        if self.outcome is ParseOutcome.HELP_REQUESTED:
            raise HelpSignal()
        if self.error is not None:
            raise self.error
