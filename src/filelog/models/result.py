"""Error write outcome model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class WriteResult:
    """Outcome of a single FileLogger.error() call."""

    error: Any
    logged: bool
    failure: BaseException | None = None
    path: Path | None = None
    reason: str = ""

    @classmethod
    def skipped(cls, error: Any, reason: str) -> WriteResult:
        """Create a result for an error the guard filtered out."""
        return cls(error=error, logged=False, reason=reason)

    @classmethod
    def from_failure(cls, error: Any, failure: BaseException, path: Path | None = None) -> WriteResult:
        """Create a result for an accepted error whose write failed."""
        return cls(error=error, logged=True, failure=failure, path=path, reason=str(failure))

    @property
    def ok(self) -> bool:
        return self.logged and self.failure is None

    @property
    def status_label(self) -> str:
        """Human-readable status."""
        if not self.logged:
            return "SKIPPED"
        if self.failure is not None:
            return "FAILED"
        return "LOGGED"
