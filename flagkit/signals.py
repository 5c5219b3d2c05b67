# Flagkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the flagkit parser.

Signals interrupt parsing without being treated as traditional exceptions.
They inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
standard `except Exception` blocks.

Signals:
- HelpSignal: Stop parsing and show usage text.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in flagkit.

    These are not errors. They stop token processing early so the caller can
    take a different path, such as printing help and exiting successfully.
    """


class HelpSignal(FlowSignal):
    """Raised when `-h` or `--help` appears in the token stream."""

    def __init__(self, message: str = "Help requested."):
        super().__init__(message)
