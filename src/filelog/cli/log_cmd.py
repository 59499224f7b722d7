"""Log command: filelog log VALUES..."""

from __future__ import annotations

import click

from filelog.cli.common import logger_from_context


@click.command("log")
@click.argument("values", nargs=-1, required=True)
@click.pass_context
def log_values(ctx: click.Context, values: tuple[str, ...]) -> None:
    """Append one line made of VALUES to logs.log."""
    with logger_from_context(ctx) as logger:
        logger.log(*values)
