"""Main Click group entry point for the filelog CLI."""

from __future__ import annotations

from pathlib import Path

import click

from filelog import __version__
from filelog.cli.error_cmd import error
from filelog.cli.log_cmd import log_values
from filelog.cli.tail_cmd import tail
from filelog.exceptions import ConfigurationError
from filelog.logger import configure_logging


@click.group()
@click.version_option(__version__, prog_name="filelog")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ./filelog.toml)",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None) -> None:
    """filelog: append log lines and error records to log files."""
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    configure_logging()


def _make_config_group() -> click.Group:
    """Create the config subcommand group."""

    @click.group()
    def config() -> None:
        """View and modify filelog configuration."""

    @config.command("show")
    @click.pass_context
    def config_show(ctx: click.Context) -> None:
        """Display current configuration."""
        from filelog.config import CONFIG_FILE, load_config
        from filelog.output.console import console

        config_file = ctx.obj.get("config_file") or CONFIG_FILE
        try:
            cfg = load_config(config_file)
        except ConfigurationError as e:
            raise click.ClickException(str(e)) from e
        console.print(f"\n[header]filelog configuration[/header] ({config_file})\n")
        console.print(f"  path: [path]{cfg.path}[/path]")
        console.print(f"  debug: {cfg.debug}")
        console.print(f"  every: {cfg.every}")
        console.print()

    @config.command("set")
    @click.argument("key", type=click.Choice(["path", "debug", "every"]))
    @click.argument("value")
    @click.pass_context
    def config_set(ctx: click.Context, key: str, value: str) -> None:
        """Set a configuration value (e.g., 'debug true')."""
        from filelog.config import load_config, save_config
        from filelog.models.config import parse_config
        from filelog.output.console import console

        config_file = ctx.obj.get("config_file")
        try:
            data = load_config(config_file).model_dump()
            if key == "path":
                data["path"] = value
            else:
                data[key] = value.lower() in ("true", "1", "yes")
            cfg = parse_config(data)
        except ConfigurationError as e:
            raise click.ClickException(str(e)) from e

        save_config(cfg, config_file)
        console.print(f"[status.logged]Set {key} = {data[key]}[/status.logged]")

    return config


# Register subcommands
cli.add_command(log_values)
cli.add_command(error)
cli.add_command(tail)
cli.add_command(_make_config_group(), "config")
