"""filelog: append log lines and error records to plain log files."""

__version__ = "0.1.0"

from filelog.core.file_logger import ErrorWrite, FileLogger
from filelog.exceptions import ConfigurationError, FileLogError, LoggerClosedError
from filelog.models import ErrorRecord, LoggerConfig, WriteResult

__all__ = [
    "__version__",
    "FileLogger",
    "ErrorWrite",
    "LoggerConfig",
    "ErrorRecord",
    "WriteResult",
    "FileLogError",
    "ConfigurationError",
    "LoggerClosedError",
]
