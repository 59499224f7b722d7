"""Error command: filelog error MESSAGE."""

from __future__ import annotations

import click

from filelog.cli.common import logger_from_context
from filelog.models.record import ErrorRecord
from filelog.output.console import console, error_console
from filelog.output.formatters import format_write_result


@click.command()
@click.argument("message")
@click.option("--code", type=int, default=None, help="Severity code (default 500)")
@click.option("--prefix", default=None, help="Label written before the message")
@click.option("--stack", default=None, help="Detail written instead of the message in debug mode")
@click.pass_context
def error(ctx: click.Context, message: str, code: int | None, prefix: str | None, stack: str | None) -> None:
    """Append an error record for MESSAGE to errors.log."""
    record = ErrorRecord(message=message, code=code, stack=stack)
    with logger_from_context(ctx) as logger:
        result = logger.error(record, prefix=prefix).result()

    if result.failure is not None:
        format_write_result(result, error_console)
        ctx.exit(1)
    format_write_result(result, console)
