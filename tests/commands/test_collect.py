"""Tests for the collect and show commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from rafall.cli import cli


@pytest.mark.usefixtures("_in_sample_project")
class TestCollectCommand:
    def test_collect(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["collect"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "OK: collect (2 posts)"
        assert "Hello world" in lines[1]
        assert "Good bye cruel world" in lines[2]

    def test_collect_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "collect"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "collect"
        assert [post["title"] for post in data["data"]["posts"]] == [
            "Hello world",
            "Good bye cruel world",
        ]

    def test_collect_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "collect"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Hello world", "Good bye cruel world"]

    def test_collect_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["collect", "--examples"])
        assert result.exit_code == 0
        assert "rafall --json collect" in result.output

    def test_skipped_file_reported_once(
        self, cli_runner: CliRunner, sample_project: Path
    ) -> None:
        (sample_project / "src" / "broken.html").write_bytes(b'<!--{"Title": "x"')
        result = cli_runner.invoke(cli, ["collect"])
        assert result.exit_code == 0
        assert result.output.count("skipping_file") == 1
        assert "WARNING: Skipped" not in result.output

    def test_missing_source_dir_fails(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--root", str(tmp_path), "collect"])
        assert result.exit_code == 1
        assert "ERROR: collect" in result.output


class TestCollectWithRoot:
    def test_root_and_conf_flags(self, cli_runner: CliRunner, sample_project: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "--root",
                str(sample_project),
                "--conf",
                str(sample_project / "etc" / "rafall.conf"),
                "collect",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["count"] == 2

    def test_missing_conf_fails(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--conf", str(tmp_path / "nope.conf"), "collect"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


@pytest.mark.usefixtures("_in_sample_project")
class TestShowCommand:
    def test_show(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "src/hello.html"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["title"] == "Hello world"
        assert data["date"] == "28 May 12 23:56 -0300"
        assert data["tags"] == ["hello", "world"]

    def test_show_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "src/goodbye.html"])
        assert result.exit_code == 0
        assert result.output.startswith("OK: show\n")
        assert "title: Good bye cruel world" in result.output

    def test_show_malformed(self, cli_runner: CliRunner, sample_project: Path) -> None:
        (sample_project / "src" / "broken.html").write_bytes(b"<!--{")
        result = cli_runner.invoke(cli, ["show", "src/broken.html"])
        assert result.exit_code == 1
        assert "ERROR: show" in result.output
