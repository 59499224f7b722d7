"""Shared test fixtures for filelog."""

from __future__ import annotations

from datetime import datetime

import pytest

from filelog.core.file_logger import FileLogger
from filelog.models.config import LoggerConfig

FIXED_NOW = datetime(2026, 10, 17, 14, 3, 5)


@pytest.fixture
def log_dir(tmp_path):
    """A not-yet-existing directory for log files."""
    return tmp_path / "var" / "logs"


@pytest.fixture
def make_logger(log_dir):
    """Build FileLoggers on a fixed clock, closing them after the test."""
    created: list[FileLogger] = []

    def _make(**options) -> FileLogger:
        options.setdefault("path", str(log_dir))
        logger = FileLogger(LoggerConfig(**options), clock=lambda: FIXED_NOW)
        created.append(logger)
        return logger

    yield _make

    for logger in created:
        logger.close()


@pytest.fixture
def logger(make_logger):
    """A FileLogger with default options."""
    return make_logger()
