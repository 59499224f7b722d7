"""Pydantic configuration model for FileLogger."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from filelog.exceptions import ConfigurationError


class LoggerConfig(BaseModel):
    """Options a FileLogger is built from. Frozen once constructed."""

    model_config = ConfigDict(frozen=True)

    path: str  # Directory holding logs.log and errors.log
    debug: bool = False  # Write error stacks instead of messages
    every: bool = False  # Write errors below code 500 too

    @field_validator("path")
    @classmethod
    def _path_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must be a non-empty string")
        return value


def parse_config(data: Mapping[str, Any]) -> LoggerConfig:
    """Validate raw options into a LoggerConfig, raising ConfigurationError."""
    try:
        return LoggerConfig(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(f"Invalid logger option '{field}': {first['msg']}", field=field) from e
