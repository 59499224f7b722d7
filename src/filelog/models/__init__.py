"""Data models for filelog."""

from filelog.models.config import LoggerConfig, parse_config
from filelog.models.record import ErrorRecord
from filelog.models.result import WriteResult

__all__ = ["LoggerConfig", "parse_config", "ErrorRecord", "WriteResult"]
