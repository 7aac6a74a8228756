"""Shared pytest fixtures for postctl tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from postctl.config.settings import PostctlSettings
from postctl.infrastructure.site import Site

SAMPLE_POST = """\
+++
title = "Functional Programming Principles"
date = 2021-02-26
description = "Pure functions, immutability, and composition."
[taxonomies]
authors = ["Ada Lovelace", "Alan Turing"]
tags = ["fp", "python"]
+++

Functional programming treats computation as the evaluation of functions.

```python
def add(a, b):
    return a + b
```
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    monkeypatch.delenv("POSTCTL_CONFIG", raising=False)
    monkeypatch.delenv("POSTCTL_SITE_ROOT", raising=False)


@pytest.fixture
def sample_post() -> str:
    """A well-formed TOML post that passes every lint rule."""
    return SAMPLE_POST


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary site directory with an empty ``content/`` tree.

    A ``postctl.toml`` marks the root so walk-up discovery stops here.
    """
    (tmp_path / "content").mkdir()
    (tmp_path / "postctl.toml").write_text('[site]\nname = "test-blog"\n', encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_post(site_root: Path) -> Callable[..., Path]:
    """Factory writing raw post content under ``content/``."""

    def _make(rel_path: str, text: str = SAMPLE_POST) -> Path:
        path = site_root / "content" / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def site(site_root: Path) -> Iterator[Site]:
    """Site handle over the temporary site root."""
    settings = PostctlSettings.from_cli(site_root=site_root)
    yield Site(settings)


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site root so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_isolated_site")`` on command test
    classes.
    """
    monkeypatch.chdir(site_root)
