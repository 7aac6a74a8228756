"""PostService — read, list, and scaffold posts.

Posts are immutable once written: there is deliberately no update or
delete operation. ``new`` refuses to overwrite an existing file.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from postctl.domain.frontmatter import FrontmatterError, FrontmatterFormat
from postctl.domain.post import TAGS_TAXONOMY, Post
from postctl.domain.slugs import slugify
from postctl.infrastructure.templates import build_template_environment
from postctl.services._helpers import today
from postctl.services.base import BaseService
from postctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

SortKey = Literal["date", "title"]

POST_TEMPLATE = "post.md.j2"


class PostService(BaseService):
    """Operations over individual posts and post listings."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def show(self, path: str | Path) -> ServiceResult:
        """Load a single post, including its body."""
        op = "show_post"
        try:
            resolved = self._site.resolve(path)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_PATH", str(exc))

        if not resolved.is_file():
            return ServiceResult.failure(op, "NOT_FOUND", f"No post at {path}")

        try:
            post = self._site.load_post(resolved)
        except (FrontmatterError, ValidationError, OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op, "INVALID_POST", f"Cannot parse {path}", reason=str(exc)
            )

        data = post.to_summary()
        data["path"] = self._site.relative(resolved)
        data["body"] = post.body
        return ServiceResult(ok=True, op=op, data=data)

    def list_posts(
        self,
        *,
        author: str | None = None,
        tag: str | None = None,
        include_drafts: bool = False,
        sort: SortKey = "date",
        limit: int | None = None,
    ) -> ServiceResult:
        """List post metadata, newest first by default.

        Files that fail to parse are reported as warnings and skipped.
        """
        posts, warnings = self.load_all()

        selected: list[tuple[Path, Post]] = []
        for path, post in posts:
            if post.draft and not include_drafts:
                continue
            if author is not None and author not in post.authors:
                continue
            if tag is not None and tag not in post.tags:
                continue
            selected.append((path, post))

        if sort == "title":
            selected.sort(key=lambda item: item[1].title.casefold())
        else:
            # Newest first; same-day posts A to Z.
            selected.sort(
                key=lambda item: (-item[1].date.toordinal(), item[1].title.casefold())
            )

        if limit is not None:
            selected = selected[:limit]

        items: list[dict[str, Any]] = []
        for path, post in selected:
            item = post.to_summary()
            item["path"] = self._site.relative(path)
            items.append(item)

        return ServiceResult(
            ok=True,
            op="list_posts",
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    def load_all(self) -> tuple[list[tuple[Path, Post]], list[str]]:
        """Parse every post file, collecting failures as warning strings."""
        posts: list[tuple[Path, Post]] = []
        warnings: list[str] = []
        for path in self._site.find_posts():
            try:
                posts.append((path, self._site.load_post(path)))
            except (FrontmatterError, ValidationError, OSError, UnicodeDecodeError) as exc:
                rel = self._site.relative(path)
                logger.debug("Skipping unparseable post", extra={"path": rel}, exc_info=True)
                reason = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
                warnings.append(f"Skipped {rel}: {reason}")
        return posts, warnings

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def new(
        self,
        title: str,
        *,
        authors: list[str] | None = None,
        description: str = "",
        post_date: date | None = None,
        tags: list[str] | None = None,
        section: str | None = None,
        draft: bool = False,
        fmt: FrontmatterFormat | str | None = None,
    ) -> ServiceResult:
        """Scaffold a new post file from the body template."""
        op = "new_post"
        title = title.strip()
        if not title:
            return ServiceResult.failure(op, "INVALID_TITLE", "Title must not be empty")

        cfg = self._site.settings.content
        fmt = FrontmatterFormat(fmt or cfg.default_format)
        authors = list(authors) if authors else list(cfg.default_authors)
        if section is None:
            section = cfg.default_section or None

        slug = slugify(title)
        try:
            path = self._site.new_post_path(slug, section=section)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_PATH", str(exc))

        env = build_template_environment("post", site_root=self._site.root)
        body = env.get_template(POST_TEMPLATE).render(title=title, description=description)

        post = Post(
            title=title,
            date=post_date or today(),
            description=description,
            authors=authors,
            body=body,
            draft=draft,
            taxonomies={TAGS_TAXONOMY: list(tags)} if tags else {},
        )

        try:
            self._site.write_post(path, post.to_text(fmt))
        except FileExistsError:
            return ServiceResult.failure(
                op,
                "ALREADY_EXISTS",
                f"A post already exists at {self._site.relative(path)}",
                path=self._site.relative(path),
            )

        warnings: list[str] = []
        if not authors:
            warnings.append("Post has no authors; 'postctl check' will report it")
        if not description:
            warnings.append("Post has no description; 'postctl check' will report it")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": self._site.relative(path),
                "title": post.title,
                "slug": slug,
                "date": post.date.isoformat(),
                "format": fmt.value,
            },
            warnings=warnings,
        )
