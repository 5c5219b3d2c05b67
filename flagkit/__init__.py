"""
Flagkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ConfigError,
    FlagDefinitionError,
    FlagkitError,
    FlagParseError,
    ValueParseError,
)
from .parser import Flag, FlagSet, FlagType, ParseOutcome, ParseResult
from .signals import HelpSignal
from .version import __version__

logger = logging.getLogger("flagkit")


__all__ = [
    "ConfigError",
    "Flag",
    "FlagDefinitionError",
    "FlagParseError",
    "FlagSet",
    "FlagType",
    "FlagkitError",
    "HelpSignal",
    "ParseOutcome",
    "ParseResult",
    "ValueParseError",
    "__version__",
]
