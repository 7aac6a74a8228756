"""Site — the single dependency injected into every service.

Holds the resolved settings and the content root, and funnels all post
file access through :mod:`postctl.infrastructure.filesystem`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from postctl.infrastructure.filesystem import (
    find_post_files,
    read_post_file,
    read_post_text,
    resolve_post_path,
    write_post_file,
)

if TYPE_CHECKING:
    from postctl.config.settings import PostctlSettings
    from postctl.domain.post import Post

logger = logging.getLogger(__name__)


class Site:
    """A static site's content tree on disk."""

    def __init__(self, settings: PostctlSettings) -> None:
        self.settings = settings
        self.root = settings.site_root

    @property
    def content_root(self) -> Path:
        return self.root / self.settings.content.directory

    def find_posts(self) -> list[Path]:
        """All post files under the content root, sorted by path."""
        paths = find_post_files(self.content_root, extensions=self.settings.content.extensions)
        logger.debug(
            "Discovered post files",
            extra={"files": len(paths), "content_root": str(self.content_root)},
        )
        return paths

    def read_text(self, path: Path) -> str:
        return read_post_text(path)

    def load_post(self, path: Path) -> Post:
        return read_post_file(path)

    def resolve(self, path: str | Path) -> Path:
        """Resolve a user-supplied post path.

        Relative paths are tried against the content root first, then the
        site root.

        Raises:
            ValueError: If the path lies outside the site root.
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            in_content = self.content_root / candidate
            candidate = in_content if in_content.exists() else self.root / candidate

        if not candidate.resolve().is_relative_to(self.root.resolve()):
            msg = f"Path is outside the site: {path}"
            raise ValueError(msg)
        return candidate

    def new_post_path(self, slug: str, *, section: str | None = None) -> Path:
        extension = next(iter(self.settings.content.extensions), ".md")
        return resolve_post_path(self.content_root, slug, section=section, extension=extension)

    def write_post(self, path: Path, content: str) -> None:
        write_post_file(path, content)
        logger.debug("Wrote new post", extra={"path": self.relative(path)})

    def relative(self, path: Path) -> str:
        """Site-relative POSIX path for display."""
        try:
            return path.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return str(path)
