# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage text for the flags declared on a `FlagSet`.

Output shape:

    Usage: prog [options] ...

    Options:
      -v, --verbose [=boolean]  Verbose output
      --port <number>           Port to bind (default: 8080)

Flags are listed in name order. The syntax column is padded to a shared width,
capped so that one very long flag does not push every description off screen.
Defaults are only shown when they carry information: a `false` boolean or an
empty string or list is omitted.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable

from flagkit.parser.flag import Flag
from flagkit.parser.flag_type import FlagType

if TYPE_CHECKING:
    from flagkit.parser.flag_set import FlagSet

COLUMN_PADDING = 4
MAX_COLUMN_WIDTH = 45


def flag_sort_key(flag: Flag) -> tuple[str, str]:
    """Case-insensitive name order, with the exact name as tie-break."""
    return (flag.name.casefold(), flag.name)


def format_flag_syntax(flag: Flag) -> str:
    alias = f"-{flag.alias}, " if flag.alias else ""
    syntax = f"  {alias}--{flag.name}"
    if flag.flag_type is FlagType.BOOLEAN:
        return f"{syntax} [={flag.type_name()}]"
    display_type = (
        FlagType.STRING.value
        if flag.flag_type is FlagType.STRING_LIST
        else flag.type_name()
    )
    return f"{syntax} <{display_type}>"


def format_default(flag: Flag) -> str | None:
    default = flag.default_as_string
    if flag.flag_type is FlagType.BOOLEAN and default == "false":
        return None
    if flag.flag_type in (FlagType.STRING, FlagType.STRING_LIST) and default == "":
        return None
    if flag.flag_type is FlagType.STRING and any(char.isspace() for char in default):
        return json.dumps(default, ensure_ascii=False)
    return default


def format_flags(program: str, flags: Iterable[Flag]) -> str:
    lines = [f"Usage: {program} [options] ...", "", "Options:"]
    ordered = sorted(flags, key=flag_sort_key)
    if not ordered:
        lines.append("  (No options defined)")
        return "\n".join(lines) + "\n"

    syntaxes = [format_flag_syntax(flag) for flag in ordered]
    width = min(max(len(syntax) for syntax in syntaxes) + COLUMN_PADDING, MAX_COLUMN_WIDTH)
    for flag, syntax in zip(ordered, syntaxes):
        if len(syntax) >= width:
            line = f"{syntax}\n{'':<{width}}{flag.description}"
        else:
            line = f"{syntax.ljust(width)}{flag.description}"
        default = format_default(flag)
        if default is not None:
            line += f" (default: {default})"
        lines.append(line)
    return "\n".join(lines) + "\n"


def format_help(flag_set: FlagSet) -> str:
    """Render the usage text for every flag declared on `flag_set`."""
    return format_flags(flag_set.program, flag_set.flags)
