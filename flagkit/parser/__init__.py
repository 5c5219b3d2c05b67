"""
Flagkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .flag import Flag
from .flag_set import FlagSet
from .flag_type import FlagType
from .help import format_help
from .parser_types import ParseOutcome, ParseResult
from .values import (
    BooleanValue,
    FlagValue,
    NumberValue,
    StringListValue,
    StringValue,
)

__all__ = [
    "BooleanValue",
    "Flag",
    "FlagSet",
    "FlagType",
    "FlagValue",
    "NumberValue",
    "ParseOutcome",
    "ParseResult",
    "StringListValue",
    "StringValue",
    "format_help",
]
