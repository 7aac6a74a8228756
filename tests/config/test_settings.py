"""Tests for PostctlSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from postctl.config.settings import PostctlSettings


class TestSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        assert settings.site_root == tmp_path
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.site.name == "my-blog"
        assert settings.content.directory == "content"
        assert settings.content.extensions == [".md"]
        assert settings.content.default_format == "toml"
        assert settings.check.require_authors is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "postctl.toml"
        toml.write_text(
            '[site]\nname = "fp-notes"\n[content]\ndefault_authors = ["Ada", "Alan"]\n'
        )
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "fp-notes"
        assert settings.content.default_authors == ["Ada", "Alan"]
        assert settings.content.directory == "content"  # default preserved

    def test_sparse_override(self, tmp_path: Path) -> None:
        toml = tmp_path / "postctl.toml"
        toml.write_text("[check]\nrequire_authors = false\n")
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        assert settings.check.require_authors is False
        assert settings.check.check_round_trip is True

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "postctl.toml").write_text("")
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "my-blog"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[site]\nname = "custom"\n')
        settings = PostctlSettings.from_cli(config_path=str(custom), site_root=tmp_path)
        assert settings.site.name == "custom"
        assert settings.config_path == custom

    def test_site_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "postctl.toml").write_text("")
        nested = tmp_path / "content" / "blog"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = PostctlSettings.from_cli()
        assert settings.site_root == tmp_path.resolve()

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "postctl.toml").write_text("[site\nname = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PostctlSettings.from_cli(site_root=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = PostctlSettings.from_cli(
            site_root=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "postctl.toml").write_text("verbose = true\n")
        settings = PostctlSettings.from_cli(site_root=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "postctl.toml").write_text('[site]\nname = "from-toml"\n')
        monkeypatch.setenv("POSTCTL_SITE__NAME", "from-env")
        settings = PostctlSettings.from_cli(site_root=tmp_path)
        assert settings.site.name == "from-env"
