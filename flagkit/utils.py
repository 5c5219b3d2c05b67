# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

DEFAULT_PROGRAM_NAME = "default_name"
LOG_MODE_ENV = "FLAGKIT_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_name() -> str:
    """Returns the basename of the running script, used as the usage header."""
    script = sys.argv[0] if sys.argv else ""
    if not script:
        return DEFAULT_PROGRAM_NAME
    return os.path.basename(script) or DEFAULT_PROGRAM_NAME


def setup_logging(
    mode: str | None = None, level: int = logging.WARNING
) -> logging.Logger:
    """
    Attach a single console handler to the `flagkit` logger.

    `mode` is "cli" (Rich console) or "json" (one JSON object per record). When
    omitted it is read from `FLAGKIT_LOG_MODE`, falling back to "cli". Calling
    this again replaces the previous handler. The root logger is left alone.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    handler.setLevel(level)
    flagkit_logger = logging.getLogger("flagkit")
    for existing in list(flagkit_logger.handlers):
        flagkit_logger.removeHandler(existing)
    flagkit_logger.addHandler(handler)
    flagkit_logger.setLevel(level)
    flagkit_logger.propagate = False
    flagkit_logger.debug("Logging initialized in '%s' mode.", mode)
    return flagkit_logger
