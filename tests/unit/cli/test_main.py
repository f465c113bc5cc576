"""Unit tests for the main CLI application."""

from cachedecimate import __version__
from cachedecimate.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"cache-decimate version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every subcommand."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("run", "check", "plan", "config"):
            assert command in result.stdout

    def test_missing_explicit_config(self) -> None:
        """An explicit --config that does not exist is an error."""
        result = runner.invoke(app, ["--config", "/nonexistent/config.toml", "check"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output
