"""
Flagkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from flagkit.cli import EXIT_OK, report_result
from flagkit.parser import FlagSet, ParseOutcome
from flagkit.protocols import OutputSink
from flagkit.utils import setup_logging


def build_flag_set(output: OutputSink | None = None) -> FlagSet:
    flags = FlagSet("flagkit", output=output)
    flags.declare_number("number", "number", alias="n", default=255)
    flags.declare_boolean("boolean", "boolean", alias="b")
    flags.declare_boolean("boolean2", "boolean", alias="c")
    flags.declare_boolean("verbose", "Enable debug logging", alias="v")
    return flags


def main(args: Sequence[str] | None = None, output: OutputSink | None = None) -> int:
    flags = build_flag_set(output)
    result = flags.parse(args)
    if result.outcome is not ParseOutcome.APPLIED:
        return report_result(flags, result)

    if flags.get("verbose").value:
        # Logging is off during the first pass; replay it with debug output.
        setup_logging(level=logging.DEBUG)
        result = flags.parse(args)

    flags.output.log(flags.program)
    for flag in flags.flags:
        flags.output.log(f"{flag.name}={flag.as_string()}")
    if result.remaining:
        flags.output.log(f"remaining={' '.join(result.remaining)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
