"""
Shared fixtures.

Logging configuration lives in context variables, so every fixture that
changes it restores the defaults afterwards.
"""

import socket
from typing import Generator

import pytest

from await_ready.logging import Entry, LoggingConfig, LogLevel

from tests.mocks import RecordingLogger


@pytest.fixture
def temp_log_directory(tmp_path) -> str:
    return str(tmp_path)


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(
        message="Test log message",
        level=LogLevel.INFO,
    )


@pytest.fixture
def debug_logging() -> Generator[LoggingConfig, None, None]:
    config = LoggingConfig()
    config.update(log_level="debug")
    yield config
    config.update(log_level="error")


@pytest.fixture
def closed_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


@pytest.fixture
def recording_loggers():
    RecordingLogger.instances.clear()
    yield RecordingLogger.instances
    RecordingLogger.instances.clear()
