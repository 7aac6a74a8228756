"""Tests for the new CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.cli import cli
from postctl.domain.lint import lint_post


@pytest.mark.usefixtures("_isolated_site")
class TestNewCommand:
    def test_creates_toml_post(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "new",
                "Pure Functions",
                "--author",
                "Ada Lovelace",
                "--description",
                "No side effects.",
                "--date",
                "2021-02-26",
                "--tag",
                "fp",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "new_post"
        assert data["data"]["path"] == "content/pure-functions.md"
        assert data["data"]["date"] == "2021-02-26"
        assert data["warnings"] == []

        text = (site_root / "content" / "pure-functions.md").read_text(encoding="utf-8")
        assert text.startswith('+++\ntitle = "Pure Functions"\ndate = 2021-02-26\n')
        assert lint_post(text).valid

    def test_yaml_format(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["new", "Legacy", "--author", "A", "--description", "D", "--format", "yaml"],
        )
        assert result.exit_code == 0, result.output
        text = (site_root / "content" / "legacy.md").read_text(encoding="utf-8")
        assert text.startswith("---\ntitle: Legacy\n")

    def test_section_and_draft(self, cli_runner: CliRunner, site_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "new", "Idea", "--author", "A", "--section", "blog", "--draft"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "content/blog/idea.md"
        text = (site_root / "content" / "blog" / "idea.md").read_text(encoding="utf-8")
        assert "draft = true" in text

    def test_missing_metadata_warns_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "Bare"])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert "WARNING" not in result.stdout

    def test_refuses_overwrite(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["new", "Twice", "--author", "A"]).exit_code == 0
        result = cli_runner.invoke(cli, ["--json", "new", "Twice", "--author", "A"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert json.loads(result.stderr)["error"]["code"] == "ALREADY_EXISTS"

    def test_escaping_section_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "Escape", "--section", "../../outside"])
        assert result.exit_code == 1
        assert "Path escapes content root" in result.stderr

    def test_bad_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "X", "--date", "26/02/2021"])
        assert result.exit_code == 2
