#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests CLI command execution with real command invocation against a
temporary config directory.
"""

import pytest
from click.testing import CliRunner

from bankcli.cli.main import main


@pytest.mark.integration
@pytest.mark.cli
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test bank --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ["settings", "query", "cache", "transactions", "version", "config"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test bank version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "bankcli v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, tmp_path):
        """Test bank config displays the configuration and data files."""
        result = self.runner.invoke(main, ["--config-dir", str(tmp_path), "config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert f"Config Directory: {tmp_path.resolve()}" in result.output
        assert "config.json: not created" in result.output
        assert "Saved queries: 0" in result.output

    def test_config_command_reports_corrupted_file(self, tmp_path):
        """Test a corrupted file is flagged but does not fail the command."""
        (tmp_path / "queries.json").write_text("{broken")

        result = self.runner.invoke(main, ["--config-dir", str(tmp_path), "config"])

        assert result.exit_code == 0
        assert "Could not read queries.json" in result.output

    def test_config_dir_from_environment(self, monkeypatch, tmp_path):
        """Test BANKCLI_CONFIG_DIR selects the directory."""
        monkeypatch.setenv("BANKCLI_CONFIG_DIR", str(tmp_path / "env_dir"))

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert str((tmp_path / "env_dir").resolve()) in result.output

    def test_invalid_command_shows_error(self):
        """Test that invalid command shows helpful error."""
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "No such command" in result.output

    def test_verbose_flag_reports_environment(self, tmp_path):
        """Test --verbose prints the environment and directory."""
        result = self.runner.invoke(main, ["--config-dir", str(tmp_path), "--verbose", "version"])

        assert result.exit_code == 0
        assert "Config directory:" in result.output

    def test_invalid_log_level_fails_cleanly(self, monkeypatch):
        """Test configuration errors become a CLI error."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output
