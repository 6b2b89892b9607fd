"""Tests for the root CLI group."""

from click.testing import CliRunner

from rafall import __version__
from rafall.cli import cli


class TestRootGroup:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "collect" in result.output
        assert "show" in result.output
        assert "--conf" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner, tmp_path) -> None:
        result = cli_runner.invoke(cli, ["--root", str(tmp_path)])
        assert result.exit_code == 0
        assert "Usage:" in result.output
