"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from postctl.config.models import CheckConfig, ContentConfig, SiteConfig


class TestContentConfig:
    def test_defaults(self) -> None:
        cfg = ContentConfig()
        assert cfg.directory == "content"
        assert cfg.extensions == [".md"]
        assert cfg.default_format == "toml"
        assert cfg.default_section == ""
        assert cfg.default_authors == []

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValidationError):
            ContentConfig(default_format="json")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = ContentConfig()
        with pytest.raises(ValidationError):
            cfg.directory = "posts"  # type: ignore[misc]


def test_site_defaults() -> None:
    assert SiteConfig().name == "my-blog"


def test_check_defaults() -> None:
    cfg = CheckConfig()
    assert cfg.require_authors is True
    assert cfg.check_round_trip is True
