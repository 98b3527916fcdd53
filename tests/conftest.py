"""
Shared fixtures for unit tests.
"""

import pytest


class FakeClock:
    """Manually advanced clock satisfying ClockProtocol."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A frozen clock that only moves when advance() is called."""
    return FakeClock()
