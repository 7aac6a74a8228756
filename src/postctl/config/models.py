"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, postctl.toml only contains
overrides. A fresh site needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- postctl.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    name: str = "my-blog"


class ContentConfig(BaseModel):
    """[content] section."""

    model_config = {"frozen": True}

    directory: str = "content"
    extensions: list[str] = Field(default_factory=lambda: [".md"])
    default_format: Literal["toml", "yaml"] = "toml"
    default_section: str = ""
    default_authors: list[str] = Field(default_factory=list)


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    require_authors: bool = True
    check_round_trip: bool = True

