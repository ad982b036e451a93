"""Shared pytest fixtures for reportkit tests."""

import pytest

from reportkit import ErrorReporter, MemorySink


@pytest.fixture
def sink():
    """A sink that records every write."""
    return MemorySink()


@pytest.fixture
def reporter(sink):
    """A reporter with default settings writing to the memory sink."""
    return ErrorReporter(sink=sink)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any REPORTKIT_* variables from the environment."""
    for name in ("REPORTKIT_FATAL", "REPORTKIT_LOG", "REPORTKIT_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
