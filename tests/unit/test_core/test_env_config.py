#!/usr/bin/env python3
"""Tests for environment configuration loading."""

import logging
from pathlib import Path

import pytest

from bankcli.core.config import Config, Environment, load_config


class TestConfigFromEnvironment:
    """Test Config.from_environment and load_config."""

    @pytest.mark.unit
    def test_reads_config_dir_from_environment(self, monkeypatch, tmp_path):
        """Test BANKCLI_CONFIG_DIR is honoured and made absolute."""
        monkeypatch.setenv("BANKCLI_CONFIG_DIR", str(tmp_path / "custom"))
        config = Config.from_environment()

        assert config.environment == Environment.TEST
        assert config.config_dir == (tmp_path / "custom").resolve()
        assert config.config_dir.is_absolute()

    @pytest.mark.unit
    def test_default_dir_outside_test_env(self, monkeypatch):
        """Test the default directory is ~/.bankcli in development."""
        monkeypatch.setenv("BANKCLI_ENV", "development")
        monkeypatch.delenv("BANKCLI_CONFIG_DIR")
        config = Config.from_environment()

        assert config.config_dir == (Path.home() / ".bankcli").resolve()

    @pytest.mark.unit
    def test_debug_forces_debug_level(self, monkeypatch):
        """Test DEBUG=true overrides LOG_LEVEL."""
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        config = Config.from_environment()

        assert config.debug is True
        assert config.log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level_fails_validation(self, monkeypatch):
        """Test load_config raises on a bad LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            load_config()

    @pytest.mark.unit
    def test_config_dir_that_is_a_file_fails_validation(self, monkeypatch, tmp_path):
        """Test a regular file as config dir is reported."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        monkeypatch.setenv("BANKCLI_CONFIG_DIR", str(blocker))

        with pytest.raises(ValueError, match="not a directory"):
            load_config()

    @pytest.mark.unit
    def test_setup_logging_sets_package_level(self):
        """Test setup_logging applies the level to the bankcli logger."""
        config = Config(environment=Environment.TEST, config_dir=Path("/tmp"), log_level="INFO")
        config.setup_logging()
        assert logging.getLogger("bankcli").level == logging.INFO

    @pytest.mark.unit
    def test_to_dict(self, tmp_path):
        """Test the display dictionary."""
        config = Config(environment=Environment.PRODUCTION, config_dir=tmp_path)
        assert config.to_dict() == {
            "environment": "production",
            "config_dir": str(tmp_path),
            "debug": False,
            "log_level": "WARNING",
        }
