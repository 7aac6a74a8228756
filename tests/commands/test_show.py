"""Tests for the show CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.cli import cli


@pytest.mark.usefixtures("_isolated_site")
class TestShowCommand:
    def test_content_relative_path(
        self, cli_runner: CliRunner, make_post: Callable[..., Path]
    ) -> None:
        make_post("blog/fp.md")
        result = cli_runner.invoke(cli, ["--json", "show", "blog/fp.md"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["path"] == "content/blog/fp.md"
        assert data["authors"] == ["Ada Lovelace", "Alan Turing"]
        assert "def add(a, b):" in data["body"]

    def test_site_relative_path(
        self, cli_runner: CliRunner, make_post: Callable[..., Path]
    ) -> None:
        make_post("blog/fp.md")
        result = cli_runner.invoke(cli, ["show", "content/blog/fp.md"])
        assert result.exit_code == 0
        assert "Functional Programming Principles" in result.stdout
        assert "Ada Lovelace, Alan Turing" in result.stdout

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "missing.md"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NOT_FOUND"

    def test_outside_site(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "../../etc/passwd"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_PATH"

    def test_unparseable(self, cli_runner: CliRunner, make_post: Callable[..., Path]) -> None:
        make_post("bad.md", "+++\ntitle = \n+++\n")
        result = cli_runner.invoke(cli, ["--json", "show", "bad.md"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_POST"
