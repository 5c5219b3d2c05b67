"""simple.py"""
import logging

from flagkit import FlagSet
from flagkit.cli import parse_or_exit
from flagkit.utils import setup_logging

flags = FlagSet("simple")
port = flags.declare_number("port", "Port to bind", alias="p", default=8080)
host = flags.declare_string("host", "Interface to listen on", default="127.0.0.1")
include = flags.declare_string_list("include", "Extra search paths", alias="i")
verbose = flags.declare_boolean("verbose", "Enable debug logging", alias="v")

if __name__ == "__main__":
    rest = parse_or_exit(flags)
    if verbose.value:
        setup_logging(level=logging.DEBUG)
        rest = parse_or_exit(flags)
    print(f"Serving on {host.value}:{port.value:g} with paths {include.value} {rest}")
