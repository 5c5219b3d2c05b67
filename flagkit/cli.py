# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry-point helpers mapping `FlagSet` parse outcomes to output and exit codes.

The parser core never prints or exits. Programs that want the conventional
behavior (help → print usage and succeed, error → print the error and usage
and fail) call one of these with the `FlagSet` they own:

- `run_cli(flag_set, args)`: Returns the exit code; prints through the sink.
- `parse_or_exit(flag_set, args)`: Calls `sys.exit` unless flags were applied,
  in which case the unconsumed tokens are returned.
"""
from __future__ import annotations

import sys
from typing import Sequence

from flagkit.logger import logger
from flagkit.parser.flag_set import FlagSet
from flagkit.parser.parser_types import ParseOutcome, ParseResult
from flagkit.protocols import OutputSink

EXIT_OK = 0
EXIT_USAGE_ERROR = 1


def report_result(
    flag_set: FlagSet, result: ParseResult, output: OutputSink | None = None
) -> int:
    """Print help and/or the error for `result` and return the exit code."""
    sink = output or flag_set.output
    if result.outcome is ParseOutcome.HELP_REQUESTED:
        sink.log(flag_set.format_help())
        return EXIT_OK
    if result.outcome is ParseOutcome.FAILED:
        logger.debug("Reporting parse failure for '%s': %s", flag_set.program, result.error)
        sink.error(str(result.error))
        sink.log(flag_set.format_help())
        return EXIT_USAGE_ERROR
    return EXIT_OK


def run_cli(
    flag_set: FlagSet,
    args: Sequence[str] | None = None,
    output: OutputSink | None = None,
) -> int:
    """Parse `args` into `flag_set` and return the process exit code."""
    result = flag_set.parse(args)
    return report_result(flag_set, result, output)


def parse_or_exit(
    flag_set: FlagSet,
    args: Sequence[str] | None = None,
    output: OutputSink | None = None,
) -> list[str]:
    """Parse `args`, exiting the process on help or error."""
    result = flag_set.parse(args)
    if result.outcome is not ParseOutcome.APPLIED:
        sys.exit(report_result(flag_set, result, output))
    return result.remaining
