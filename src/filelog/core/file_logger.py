"""File-backed logger writing logs.log and errors.log on a background worker."""

from __future__ import annotations

import asyncio
import os
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Generator, Mapping

from filelog.core.formatting import format_error_line, format_log_line
from filelog.exceptions import LoggerClosedError
from filelog.logger import log
from filelog.models.config import LoggerConfig, parse_config
from filelog.models.record import ErrorRecord, get_field, normalize_error, skip_reason
from filelog.models.result import WriteResult

LOGS_FILE = "logs.log"
ERRORS_FILE = "errors.log"

ErrorHandler = Callable[[Any], None]


def _ensure_file(path: Path) -> None:
    """Create ``path`` and its parent directories if missing."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)


def _append(path: Path, text: str) -> None:
    with path.open("a", encoding="utf-8", newline="") as fh:
        fh.write(text)


class ErrorWrite:
    """Pending outcome of FileLogger.error().

    ``error`` is available immediately. The WriteResult arrives once the
    write settles and can be awaited, waited on, or received by callback.
    """

    def __init__(self, error: Any, future: Future[WriteResult]):
        self.error = error
        self._future = future

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> WriteResult:
        """Block until the write settles and return its WriteResult."""
        return self._future.result(timeout)

    def add_done_callback(self, callback: Callable[[WriteResult], Any]) -> None:
        self._future.add_done_callback(lambda fut: callback(fut.result()))

    def __await__(self) -> Generator[Any, None, WriteResult]:
        return asyncio.wrap_future(self._future).__await__()


class FileLogger:
    """Append log lines and error records under a single directory.

    ``log`` is fire-and-forget and never raises. ``error`` normalizes the
    given object in place, filters it, and writes it on the background worker.
    """

    def __init__(
        self,
        config: LoggerConfig | Mapping[str, Any] | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        **options: Any,
    ):
        self._config = _coerce_config(config, options)
        self._clock = clock or datetime.now
        self._handlers: list[ErrorHandler] = []
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="filelog")
        self._closed = False

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def every(self) -> bool:
        return self._config.every

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def logs_file(self) -> Path:
        """logs.log resolved against the current working directory."""
        return Path(os.path.abspath(os.path.join(self.path, LOGS_FILE)))

    @property
    def errors_file(self) -> Path:
        """errors.log resolved against the current working directory."""
        return Path(os.path.abspath(os.path.join(self.path, ERRORS_FILE)))

    def on_error(self, handler: ErrorHandler) -> ErrorHandler:
        """Register ``handler`` to receive every accepted error object."""
        self._handlers.append(handler)
        return handler

    def remove_error_handler(self, handler: ErrorHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def log(self, *values: Any) -> None:
        """Append the space-joined values to logs.log without waiting."""
        if self._closed:
            log.debug("Logger for %s is closed, dropping log line", self.path)
            return

        target = self.logs_file
        try:
            line = format_log_line(self._clock(), values)
        except Exception:
            log.debug("Could not format log line for %s", target, exc_info=True)
            return
        try:
            self._executor.submit(self._append_quietly, target, line)
        except RuntimeError:
            # Executor shut down between the closed check and submit
            log.debug("Logger for %s is closed, dropping log line", self.path)

    def error(
        self,
        error: Any,
        prefix: str | None = None,
        callback: Callable[[WriteResult], Any] | None = None,
    ) -> ErrorWrite:
        """Write ``error`` to errors.log and return its pending ErrorWrite.

        ``error`` is an in/out parameter: code, message and stack defaults
        are filled in place and ``logged`` is set, so passing the same object
        again is skipped. A bare string is wrapped in an ErrorRecord.
        """
        if isinstance(error, str) and error:
            error = ErrorRecord(message=error)

        reason = skip_reason(error, self.every)
        if reason is not None:
            log.debug("Skipping error record: %s", reason)
            return self._settled(WriteResult.skipped(error, reason), callback)

        if self._closed:
            return self._settled(WriteResult.from_failure(error, LoggerClosedError(self.path)), callback)

        try:
            normalize_error(error)
        except (AttributeError, TypeError) as e:
            # Frozen dataclasses, __slots__ objects and the like
            log.warning("Cannot update error record %r in place: %s", error, e)
            return self._settled(WriteResult.skipped(error, f"read-only record: {e}"), callback)
        message = get_field(error, "stack" if self.debug else "message")
        line = format_error_line(
            self._clock(),
            get_field(error, "code"),
            message,
            get_field(error, "prefix") or prefix,
        )
        target = self.errors_file

        try:
            future = self._executor.submit(self._write_error, error, target, line)
        except RuntimeError:
            return self._settled(WriteResult.from_failure(error, LoggerClosedError(self.path)), callback)

        pending = ErrorWrite(error, future)
        if callback is not None:
            pending.add_done_callback(callback)
        return pending

    def close(self, wait: bool = True) -> None:
        """Stop accepting writes; with ``wait`` let queued writes finish first."""
        self._closed = True
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> FileLogger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _settled(self, result: WriteResult, callback: Callable[[WriteResult], Any] | None) -> ErrorWrite:
        future: Future[WriteResult] = Future()
        future.set_result(result)
        pending = ErrorWrite(result.error, future)
        if callback is not None:
            pending.add_done_callback(callback)
        return pending

    @staticmethod
    def _append_quietly(target: Path, line: str) -> None:
        try:
            _ensure_file(target)
            _append(target, line)
        except OSError as e:
            log.debug("Dropped log line for %s: %s", target, e)

    def _write_error(self, error: Any, target: Path, line: str) -> WriteResult:
        try:
            _ensure_file(target)
            _append(target, line)
        except OSError as e:
            log.error("Failed to write error record to %s: %s", target, e)
            result = WriteResult.from_failure(error, e, path=target)
        else:
            result = WriteResult(error=error, logged=True, path=target)

        self._notify(error)
        return result

    def _notify(self, error: Any) -> None:
        for handler in list(self._handlers):
            try:
                handler(error)
            except Exception:
                log.exception("Error handler %r failed", handler)


def _coerce_config(config: LoggerConfig | Mapping[str, Any] | None, options: dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig from a model, a mapping and/or keyword options."""
    if isinstance(config, LoggerConfig):
        if not options:
            return config
        data = config.model_dump()
    else:
        data = dict(config or {})
    data.update(options)
    return parse_config(data)
