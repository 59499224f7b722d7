"""Error record normalization.

FileLogger.error() accepts any error-like object: a mutable mapping, an
exception, or a plain object such as ErrorRecord. Missing fields are filled
in place on the caller's object, so the caller sees the defaults afterwards.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

DEFAULT_CODE = 500
DEFAULT_MESSAGE = "Unknown error"
SEVERITY_THRESHOLD = 500


@dataclass
class ErrorRecord:
    """A plain error record for callers that have no exception at hand."""

    message: str | None = None
    code: int | None = None
    stack: str | None = None
    prefix: str | None = None
    logged: bool = False


def get_field(error: Any, name: str) -> Any:
    """Read a field from a mapping key or an attribute."""
    if isinstance(error, Mapping):
        return error.get(name)
    return getattr(error, name, None)


def set_field(error: Any, name: str, value: Any) -> None:
    """Write a field to a mapping key or an attribute."""
    if isinstance(error, MutableMapping):
        error[name] = value
    else:
        setattr(error, name, value)


def _as_number(value: Any) -> float | None:
    """Numeric value of a code, accepting numeric strings like "404"."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def skip_reason(error: Any, every: bool = False) -> str | None:
    """Return why ``error`` should not be written, or None to accept it."""
    # An empty mapping is an error record with every field missing
    if error is None or (not isinstance(error, Mapping) and not error):
        return "empty"
    if isinstance(error, Mapping) and not isinstance(error, MutableMapping):
        return "read-only record"
    if get_field(error, "logged"):
        return "already logged"
    code = get_field(error, "code")
    severity = _as_number(code)
    if not every and severity is not None and severity < SEVERITY_THRESHOLD:
        return f"code {code} below {SEVERITY_THRESHOLD}"
    return None


def _default_message(error: Any) -> str:
    if isinstance(error, BaseException):
        return str(error) or DEFAULT_MESSAGE
    return DEFAULT_MESSAGE


def _default_stack(error: Any, message: str) -> str:
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()
    return message


def normalize_error(error: Any) -> Any:
    """Fill code, message and stack defaults in place and mark ``error`` logged.

    Returns the same object so calls can be chained.
    """
    code = get_field(error, "code")
    message = get_field(error, "message")
    stack = get_field(error, "stack")

    if not message:
        message = _default_message(error)
    if not stack:
        stack = _default_stack(error, message)

    set_field(error, "code", code or DEFAULT_CODE)
    set_field(error, "message", message)
    set_field(error, "stack", stack)
    set_field(error, "logged", True)
    return error
