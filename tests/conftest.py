import pytest

from sublisp.config import Settings
from sublisp.host import TableHost


class RecordingHost(TableHost):
    """TableHost that records every global lookup and native call."""

    __slots__ = ("lookups", "invocations")

    def __init__(self, bindings=None):
        super().__init__(bindings)
        self.lookups = []
        self.invocations = []

    def resolve_global(self, symbol):
        self.lookups.append(symbol)
        return super().resolve_global(symbol)

    def invoke_native(self, proc, args):
        self.invocations.append((proc.name, list(args)))
        return super().invoke_native(proc, args)


@pytest.fixture
def host():
    """Return a fresh recording host with the standard primitives."""
    return RecordingHost()


@pytest.fixture
def settings():
    return Settings(max_depth=100)
