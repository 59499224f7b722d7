"""Tests for config models and TOML loading."""

from __future__ import annotations

import pytest

from filelog.config import DEFAULT_LOG_DIR, load_config, save_config
from filelog.exceptions import ConfigurationError
from filelog.models.config import LoggerConfig, parse_config


class TestLoggerConfig:
    """Tests for LoggerConfig validation."""

    def test_defaults(self):
        cfg = LoggerConfig(path="logs")
        assert not cfg.debug
        assert not cfg.every

    def test_blank_path_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config({"path": ""})
        assert exc_info.value.field == "path"
        assert "non-empty" in str(exc_info.value)

    def test_non_string_path_rejected(self):
        with pytest.raises(ConfigurationError):
            parse_config({"path": 42})

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_config({})

    def test_unknown_options_ignored(self):
        cfg = parse_config({"path": "logs", "colour": "blue"})
        assert cfg.path == "logs"


class TestConfigFile:
    """Tests for load_config / save_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "absent.toml")
        assert cfg == LoggerConfig(path=DEFAULT_LOG_DIR)
        assert not (tmp_path / "absent.toml").exists()

    def test_round_trip(self, tmp_path):
        target = tmp_path / "conf" / "filelog.toml"
        save_config(LoggerConfig(path="/var/log/app", debug=True, every=True), target)

        assert load_config(target) == LoggerConfig(path="/var/log/app", debug=True, every=True)

    def test_partial_table_keeps_default_path(self, tmp_path):
        target = tmp_path / "filelog.toml"
        target.write_text("[logger]\ndebug = true\n", encoding="utf-8")

        cfg = load_config(target)
        assert cfg.path == DEFAULT_LOG_DIR
        assert cfg.debug

    def test_malformed_file_raises(self, tmp_path):
        target = tmp_path / "filelog.toml"
        target.write_text("[logger\npath = ", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(target)

    def test_blank_path_in_file_raises(self, tmp_path):
        target = tmp_path / "filelog.toml"
        target.write_text('[logger]\npath = " "\n', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(target)
