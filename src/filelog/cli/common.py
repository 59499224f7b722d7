"""Shared helpers for CLI commands."""

from __future__ import annotations

import click

from filelog.config import load_config
from filelog.core.file_logger import FileLogger
from filelog.exceptions import ConfigurationError


def logger_from_context(ctx: click.Context) -> FileLogger:
    """Build a FileLogger from the --config file, as a CLI error on bad config."""
    try:
        return FileLogger(load_config(ctx.obj.get("config_file")))
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
