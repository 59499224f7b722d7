"""TOML configuration loading from ./filelog.toml."""

from __future__ import annotations

from pathlib import Path

import toml

from filelog.exceptions import ConfigurationError
from filelog.logger import log
from filelog.models.config import LoggerConfig, parse_config

CONFIG_FILE = Path("filelog.toml")
DEFAULT_LOG_DIR = "logs"


def load_config(config_file: Path | None = None) -> LoggerConfig:
    """Load the [logger] table, falling back to defaults if the file is missing."""
    target = config_file or CONFIG_FILE
    if not target.exists():
        log.info("No config file at %s, using defaults", target)
        return LoggerConfig(path=DEFAULT_LOG_DIR)

    try:
        raw = toml.loads(target.read_text(encoding="utf-8"))
    except toml.TomlDecodeError as e:
        raise ConfigurationError(f"Invalid config file {target}: {e}") from e

    log.debug("Loaded config: %s", raw)
    section = raw.get("logger", {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid config file {target}: [logger] must be a table", field="logger")
    return parse_config({"path": DEFAULT_LOG_DIR, **section})


def save_config(config: LoggerConfig, config_file: Path | None = None) -> None:
    """Write the config back as a [logger] table."""
    target = config_file or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(toml.dumps({"logger": config.model_dump()}), encoding="utf-8")
    log.info("Saved config to %s", target)
