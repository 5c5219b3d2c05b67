import pytest

from flagkit.parser import FlagSet
from flagkit.providers import StaticArgumentSource


class RecordingOutputSink:
    """Collects everything written through the `OutputSink` protocol."""

    def __init__(self):
        self.logs: list[str] = []
        self.errors: list[str] = []

    def log(self, text: str) -> None:
        self.logs.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def sink():
    return RecordingOutputSink()


@pytest.fixture
def flag_set(sink):
    return FlagSet("test-cli", argument_source=StaticArgumentSource([]), output=sink)
