"""Pytest configuration for profiler tests."""

import sys
from pathlib import Path

import pytest


def ensure_package_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))

ensure_package_on_path()


class FakeClock:
    """Clock returning a manually advanced millisecond value."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def advance(self, millis: int) -> None:
        self.now += millis

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1_000)
