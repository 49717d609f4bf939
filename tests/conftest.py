"""
Pytest configuration for the maglev test suite.
"""

import pytest

from typing import Callable, Generator

from maglev.logging import Entry, LoggingConfig, LogLevel, LoggerStream


@pytest.fixture(autouse=True)
def reset_logging_config() -> Generator[LoggingConfig, None, None]:
    config = LoggingConfig()
    config.update(
        log_level="error",
        log_output="stderr",
        log_format="template",
        disabled_loggers=[],
    )
    yield config
    config.update(
        log_level="error",
        log_output="stderr",
        log_format="template",
        disabled_loggers=[],
    )


@pytest.fixture
def debug_logging(reset_logging_config: LoggingConfig) -> LoggingConfig:
    reset_logging_config.update(log_level="debug")
    return reset_logging_config


@pytest.fixture
def logger_stream() -> LoggerStream:
    return LoggerStream(name="test")


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(
        message="Test log message",
        level=LogLevel.INFO,
    )


@pytest.fixture
def pinned_hasher() -> Callable[[dict[str, tuple[int, int]]], Callable[[str], int]]:
    """
    Build a hash function returning chosen (offset, skip) digest halves.

    The upper 32 bits of a digest select the offset and the lower 32 bits
    the skip, so pinning both makes permutations predictable.
    """

    def build(digests: dict[str, tuple[int, int]]) -> Callable[[str], int]:
        def pinned(backend: str) -> int:
            upper, lower = digests[backend]
            return (upper << 32) | lower

        return pinned

    return build
