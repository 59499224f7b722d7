"""Tail command: filelog tail."""

from __future__ import annotations

from collections import deque

import click

from filelog.cli.common import logger_from_context
from filelog.output.console import console
from filelog.output.formatters import format_log_lines


@click.command()
@click.option("--errors", "errors_file", is_flag=True, help="Show errors.log instead of logs.log")
@click.option("-n", "--lines", "count", type=click.IntRange(min=1), default=10, show_default=True)
@click.pass_context
def tail(ctx: click.Context, errors_file: bool, count: int) -> None:
    """Show the last lines of a log file."""
    with logger_from_context(ctx) as logger:
        target = logger.errors_file if errors_file else logger.logs_file

    if not target.exists():
        console.print(f"[status.skipped]No entries yet ({target})[/status.skipped]")
        return

    with target.open(encoding="utf-8") as fh:
        lines = list(deque(fh, maxlen=count))
    format_log_lines(lines, console)
