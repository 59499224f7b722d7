"""Line formatting for logs.log and errors.log."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable

TIMESTAMP_FORMAT = "%a %b %d %Y %H:%M:%S"
SEPARATOR = " >>> "


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp like 'Sat Oct 17 2026 14:03:05'."""
    return moment.strftime(TIMESTAMP_FORMAT)


def format_value(value: Any) -> str:
    """Stringify one log argument; containers render as JSON text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            # Non-string keys or self-referencing containers
            return str(value)
    return str(value)


def format_log_line(moment: datetime, values: Iterable[Any]) -> str:
    message = " ".join(format_value(v) for v in values)
    return f"{format_timestamp(moment)}{SEPARATOR}{message}\n"


def format_error_line(moment: datetime, code: Any, message: Any, prefix: str | None = None) -> str:
    """Build '<timestamp> >>> Error <code>: [<prefix> - ]<message>' plus newline."""
    label = f"{prefix} - " if prefix else ""
    return f"{format_timestamp(moment)}{SEPARATOR}Error {code}: {label}{message}\n"
