"""Custom exception hierarchy for filelog."""

from __future__ import annotations


class FileLogError(Exception):
    """Base exception for all filelog errors."""


class ConfigurationError(FileLogError, ValueError):
    """Raised when logger options or the config file are invalid."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class LoggerClosedError(FileLogError):
    """Reported when a write is requested after the logger was closed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Logger for '{path}' is closed.")
