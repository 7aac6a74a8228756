"""Post record — front-matter fields plus the body as an opaque blob.

Attributes map to front-matter keys the way the static-site generator reads
them. Authors live in the ``[taxonomies]`` table on disk but are lifted to a
top-level ``authors`` attribute on the record.

INVARIANT: A post is immutable after authoring. There is no update path;
a new post is a new record (and a new file).
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, Field

from postctl.domain.frontmatter import (
    FrontmatterError,
    FrontmatterFormat,
    load_block,
    order_frontmatter,
    plain_frontmatter,
    render_frontmatter,
    split_frontmatter,
)

AUTHORS_TAXONOMY = "authors"
TAGS_TAXONOMY = "tags"


def authors_from_frontmatter(fm: Mapping[str, Any]) -> Any:
    """Locate the authors value in a plain front-matter mapping.

    ``taxonomies.authors`` wins; a top-level ``authors`` list or a single
    ``author`` string are accepted as fallbacks. Returns None when absent.
    The value is returned unvalidated.
    """
    taxonomies = fm.get("taxonomies")
    if isinstance(taxonomies, Mapping) and AUTHORS_TAXONOMY in taxonomies:
        return taxonomies[AUTHORS_TAXONOMY]
    if "authors" in fm:
        return fm["authors"]
    author = fm.get("author")
    if isinstance(author, str):
        return [author]
    return author


class Post(BaseModel):
    """A single blog post."""

    model_config = {"frozen": True, "extra": "ignore"}

    title: str
    date: dt.date
    description: str = ""
    authors: list[str] = Field(default_factory=list)
    body: str = ""
    updated: dt.date | None = None
    draft: bool = False
    slug: str | None = None
    taxonomies: dict[str, list[str]] = Field(default_factory=dict)
    extra: dict[str, Any] = Field(default_factory=dict)

    @property
    def tags(self) -> list[str]:
        return self.taxonomies.get(TAGS_TAXONOMY, [])

    # --- Construction ---

    @classmethod
    def from_frontmatter(cls, frontmatter: Mapping[str, Any], body: str = "") -> Self:
        """Build a post from a parsed front-matter mapping and body text.

        Raises:
            pydantic.ValidationError: If ``title`` or ``date`` is missing, or
                a field has the wrong shape.
        """
        fm: dict[str, Any] = plain_frontmatter(frontmatter)
        authors = authors_from_frontmatter(fm)
        fm.pop("authors", None)
        fm.pop("author", None)

        # Non-table values are left for pydantic to reject.
        taxonomies = fm.pop("taxonomies", None)
        if taxonomies is None:
            taxonomies = {}
        elif isinstance(taxonomies, Mapping):
            taxonomies = {k: v for k, v in taxonomies.items() if k != AUTHORS_TAXONOMY}

        for key in ("date", "updated"):
            # TOML offset datetimes are accepted; only the calendar day is kept.
            if isinstance(fm.get(key), dt.datetime):
                fm[key] = fm[key].date()

        return cls.model_validate(
            {
                **fm,
                "authors": authors if authors is not None else [],
                "taxonomies": taxonomies,
                "body": body,
            }
        )

    @classmethod
    def from_text(cls, content: str) -> Self:
        """Parse full post content (front-matter block plus body).

        Raises:
            FrontmatterError: If the content has no front-matter block, or
                the block is malformed.
        """
        block = split_frontmatter(content)
        if block is None:
            msg = "no front-matter block at start of file"
            raise FrontmatterError(FrontmatterFormat.TOML, msg)
        fm = load_block(block.text, block.format)
        return cls.from_frontmatter(fm, block.body)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        return cls.from_text(path.read_text(encoding="utf-8"))

    # --- Serialization ---

    def to_frontmatter(self) -> dict[str, Any]:
        """Serialize to an ordered front-matter mapping (body excluded)."""
        fm: dict[str, Any] = {
            "title": self.title,
            "date": self.date,
            "updated": self.updated,
            "description": self.description,
            "slug": self.slug,
        }
        if self.draft:
            fm["draft"] = True

        taxonomies: dict[str, list[str]] = {}
        if self.authors:
            taxonomies[AUTHORS_TAXONOMY] = list(self.authors)
        for name, terms in self.taxonomies.items():
            taxonomies[name] = list(terms)
        if taxonomies:
            fm["taxonomies"] = taxonomies
        if self.extra:
            fm["extra"] = dict(self.extra)
        return order_frontmatter(fm)

    def to_text(self, fmt: FrontmatterFormat = FrontmatterFormat.TOML) -> str:
        """Render the full file content for this post."""
        return render_frontmatter(self.to_frontmatter(), self.body, fmt)

    def to_summary(self) -> dict[str, Any]:
        """JSON-safe metadata without the body, for listings and indexes."""
        return {
            "title": self.title,
            "date": self.date.isoformat(),
            "description": self.description,
            "authors": list(self.authors),
            "tags": list(self.tags),
            "draft": self.draft,
            "slug": self.slug,
        }
